from .country import CountryAdmin
from .customer import CustomerAdmin

__all__ = ["CountryAdmin", "CustomerAdmin"]
