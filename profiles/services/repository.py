# profiles/services/repository.py

from customers.models import Country, Customer, CustomerAddress
from customers.utils.choices import AddressType

PROTECTED_ADDRESS_FIELDS = ("id", "pk", "type", "customer", "customer_id")


class CustomerRepository:
    """
    Data access for customers, their addresses and countries.

    Lookups return ``None`` when the record does not exist.
    """

    def get_customer(self, user) -> Customer | None:
        return Customer.objects.filter(pk=user.pk).first()

    def create_customer(self, user, data: dict) -> Customer:
        customer = Customer.objects.create(user=user, **data)
        customer.refresh_from_db()
        return customer

    def update_customer(self, customer: Customer, data: dict) -> Customer:
        for attr, value in data.items():
            setattr(customer, attr, value)
        customer.save()
        return customer

    def get_address(
            self, customer: Customer | None, address_type: str
    ) -> CustomerAddress | None:
        if customer is None:
            return None
        return CustomerAddress.objects.filter(
            customer=customer, type=address_type
        ).first()

    def create_address(
            self, customer: Customer, address_type: str, data: dict
    ) -> CustomerAddress:
        if address_type not in AddressType.values:
            raise ValueError(f"Unknown address type: {address_type!r}")
        return CustomerAddress.objects.create(
            **self._address_fields(data),
            customer=customer,
            type=address_type,
        )

    def update_address(
            self, address: CustomerAddress, data: dict
    ) -> CustomerAddress:
        for attr, value in self._address_fields(data).items():
            setattr(address, attr, value)
        address.save()
        return address

    def list_countries(self) -> list[Country]:
        return list(Country.objects.order_by("name", "id"))

    def save_password(self, user, raw_password: str):
        user.set_password(raw_password)
        user.save(update_fields=["password"])
        return user

    @staticmethod
    def _address_fields(data: dict) -> dict:
        return {
            key: value for key, value in data.items()
            if key not in PROTECTED_ADDRESS_FIELDS
        }
