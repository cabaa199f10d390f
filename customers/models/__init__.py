from .country import Country
from .customer import Customer
from .address import CustomerAddress

__all__ = ["Country", "Customer", "CustomerAddress"]
