# profiles/services/profile.py

import logging
from dataclasses import dataclass, field

from django.db import transaction

from customers.models import Country, Customer, CustomerAddress
from customers.utils.choices import AddressType
from profiles.services.repository import CustomerRepository

logger = logging.getLogger(__name__)

ADDRESS_SECTIONS = {
    "shipping": AddressType.SHIPPING,
    "billing": AddressType.BILLING,
}


@dataclass(frozen=True)
class ProfileViewModel:
    user: object
    customer: Customer | None
    shipping_address: CustomerAddress
    billing_address: CustomerAddress
    countries: list[Country] = field(default_factory=list)


class ProfileService:
    """
    Profile use cases of the authenticated user: render, upsert, password.
    """

    def __init__(self, repository: CustomerRepository | None = None):
        self.repository = repository or CustomerRepository()

    def build_profile_view(self, user) -> ProfileViewModel:
        customer = self.repository.get_customer(user)
        return ProfileViewModel(
            user=user,
            customer=customer,
            shipping_address=self._address_or_placeholder(
                customer, AddressType.SHIPPING
            ),
            billing_address=self._address_or_placeholder(
                customer, AddressType.BILLING
            ),
            countries=self.repository.list_countries(),
        )

    def update_profile(self, user, data: dict) -> Customer:
        """
        Create or update the customer and both of its addresses.

        ``data`` is the validated payload: customer fields at the top level
        plus ``shipping`` and ``billing`` sub-dicts.
        """
        customer_data = {
            key: value for key, value in data.items()
            if key not in ADDRESS_SECTIONS
        }

        with transaction.atomic():
            customer = self.repository.get_customer(user)
            if customer:
                self.repository.update_customer(customer, customer_data)
            else:
                customer = self.repository.create_customer(
                    user, customer_data
                )
                logger.info(f"Customer created for user {user.pk}")

            for section, address_type in ADDRESS_SECTIONS.items():
                self._upsert_address(
                    customer, address_type, data.get(section) or {}
                )

        logger.info(f"Profile updated for user {user.pk}")
        return customer

    def update_password(self, user, new_password: str):
        self.repository.save_password(user, new_password)
        logger.info(f"Password updated for user {user.pk}")
        return user

    def _address_or_placeholder(
            self, customer: Customer | None, address_type: str
    ) -> CustomerAddress:
        address = self.repository.get_address(customer, address_type)
        if address is None:
            # Unsaved; lets the form render empty fields.
            address = CustomerAddress(type=address_type)
        return address

    def _upsert_address(
            self, customer: Customer, address_type: str, data: dict
    ) -> CustomerAddress:
        address = self.repository.get_address(customer, address_type)
        if address:
            return self.repository.update_address(address, data)
        address = self.repository.create_address(customer, address_type, data)
        logger.info(
            f"{address_type} address created for customer {customer.pk}"
        )
        return address
