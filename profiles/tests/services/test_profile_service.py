# profiles/tests/services/test_profile_service.py
import logging

import pytest
from django.contrib.auth.hashers import check_password

from customers.models import Customer, CustomerAddress
from customers.utils.choices import AddressType
from profiles.services import CustomerRepository, ProfileService


def validated(payload, usa, canada):
    """Shape a raw payload like ProfileUpdateSerializer.validated_data."""
    countries = {usa.id: usa, canada.id: canada}
    data = {k: v for k, v in payload.items() if k not in ("shipping", "billing")}
    for section in ("shipping", "billing"):
        address = dict(payload[section])
        address["country"] = countries[address.pop("country_id")]
        address.setdefault("address2", "")
        address.setdefault("state", "")
        data[section] = address
    return data


@pytest.mark.django_db
class TestBuildProfileView:

    def test_user_without_customer_gets_typed_placeholders(self, user):
        view_model = ProfileService().build_profile_view(user)

        assert view_model.user == user
        assert view_model.customer is None
        assert view_model.shipping_address.pk is None
        assert view_model.shipping_address.type == AddressType.SHIPPING
        assert view_model.billing_address.pk is None
        assert view_model.billing_address.type == AddressType.BILLING
        assert CustomerAddress.objects.count() == 0
        assert Customer.objects.count() == 0

    def test_persisted_addresses_are_returned(
            self, user, usa, customer_factory, address_factory
    ):
        customer = customer_factory(user)
        shipping = address_factory(customer, AddressType.SHIPPING, usa)

        view_model = ProfileService().build_profile_view(user)

        assert view_model.customer == customer
        assert view_model.shipping_address == shipping
        assert view_model.billing_address.pk is None
        assert view_model.billing_address.type == AddressType.BILLING

    def test_countries_sorted_by_name(self, user, usa, canada):
        view_model = ProfileService().build_profile_view(user)

        names = [c.name for c in view_model.countries]
        assert names == sorted(names)
        assert names == ["Canada", "United States of America"]


@pytest.mark.django_db
class TestUpdateProfile:

    def test_fresh_user_creates_customer_and_both_addresses(
            self, user, usa, canada, profile_payload
    ):
        customer = ProfileService().update_profile(
            user, validated(profile_payload, usa, canada)
        )

        assert Customer.objects.count() == 1
        assert customer.pk == user.pk
        assert customer.first_name == "Jane"
        assert customer.phone == "+1 555 0100"

        shipping = CustomerAddress.objects.get(type=AddressType.SHIPPING)
        billing = CustomerAddress.objects.get(type=AddressType.BILLING)
        assert CustomerAddress.objects.count() == 2
        assert shipping.customer_id == user.pk
        assert billing.customer_id == user.pk
        assert shipping.address1 == "1 Rd"
        assert shipping.country == usa
        assert billing.address2 == "Suite 5"
        assert billing.country == canada

    def test_existing_records_updated_in_place(
            self, user, usa, canada, profile_payload,
            customer_factory, address_factory
    ):
        customer = customer_factory(user, first_name="Old")
        shipping = address_factory(customer, AddressType.SHIPPING, canada)
        billing = address_factory(customer, AddressType.BILLING, canada)

        ProfileService().update_profile(
            user, validated(profile_payload, usa, canada)
        )

        assert Customer.objects.count() == 1
        assert CustomerAddress.objects.count() == 2
        assert set(CustomerAddress.objects.values_list("id", flat=True)) == {
            shipping.id, billing.id
        }
        customer.refresh_from_db()
        shipping.refresh_from_db()
        billing.refresh_from_db()
        assert customer.first_name == "Jane"
        assert shipping.address1 == "1 Rd"
        assert shipping.country == usa
        assert shipping.type == AddressType.SHIPPING
        assert billing.address1 == "2 Rd"
        assert billing.type == AddressType.BILLING

    def test_missing_billing_is_created(
            self, user, usa, canada, profile_payload,
            customer_factory, address_factory
    ):
        customer = customer_factory(user)
        shipping = address_factory(customer, AddressType.SHIPPING, usa)

        ProfileService().update_profile(
            user, validated(profile_payload, usa, canada)
        )

        assert Customer.objects.count() == 1
        assert CustomerAddress.objects.count() == 2
        shipping.refresh_from_db()
        assert shipping.address1 == "1 Rd"
        billing = CustomerAddress.objects.get(
            customer=customer, type=AddressType.BILLING
        )
        assert billing.address1 == "2 Rd"

    def test_payload_cannot_override_type_or_owner(
            self, user, user_factory, usa, canada, profile_payload,
            customer_factory
    ):
        other = customer_factory(user_factory())
        data = validated(profile_payload, usa, canada)
        data["shipping"]["type"] = AddressType.BILLING
        data["shipping"]["customer"] = other

        ProfileService().update_profile(user, data)

        shipping = CustomerAddress.objects.get(address1="1 Rd")
        assert shipping.type == AddressType.SHIPPING
        assert shipping.customer_id == user.pk
        assert not other.addresses.exists()

    def test_logs_customer_creation(
            self, user, usa, canada, profile_payload, caplog
    ):
        with caplog.at_level(logging.INFO):
            ProfileService().update_profile(
                user, validated(profile_payload, usa, canada)
            )
        assert f"Customer created for user {user.pk}" in caplog.text
        assert f"Profile updated for user {user.pk}" in caplog.text

    def test_failure_rolls_back_every_write(
            self, user, usa, canada, profile_payload, monkeypatch
    ):
        repository = CustomerRepository()
        calls = {"n": 0}
        original = repository.create_address

        def failing_create_address(customer, address_type, data):
            calls["n"] += 1
            if address_type == AddressType.BILLING:
                raise RuntimeError("database went away")
            return original(customer, address_type, data)

        monkeypatch.setattr(
            repository, "create_address", failing_create_address
        )

        with pytest.raises(RuntimeError):
            ProfileService(repository).update_profile(
                user, validated(profile_payload, usa, canada)
            )

        assert calls["n"] == 2
        assert Customer.objects.count() == 0
        assert CustomerAddress.objects.count() == 0


@pytest.mark.django_db
class TestUpdatePassword:

    def test_stores_hash_not_plaintext(self, user):
        ProfileService().update_password(user, "N3w-Secure!pass")

        user.refresh_from_db()
        assert user.password != "N3w-Secure!pass"
        assert check_password("N3w-Secure!pass", user.password)
        assert user.check_password("N3w-Secure!pass")


@pytest.mark.django_db
class TestCustomerRepository:

    def test_lookups_return_none_when_absent(self, user):
        repository = CustomerRepository()
        assert repository.get_customer(user) is None
        assert repository.get_address(None, AddressType.SHIPPING) is None

    def test_create_address_rejects_unknown_type(
            self, user, usa, customer_factory
    ):
        customer = customer_factory(user)
        with pytest.raises(ValueError):
            CustomerRepository().create_address(
                customer, "pickup",
                {"address1": "x", "city": "y", "zipcode": "z", "country": usa}
            )
