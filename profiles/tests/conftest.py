# profiles/tests/conftest.py
import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from customers.models import Country, Customer, CustomerAddress

User = get_user_model()

PASSWORD = "Old-Secret#2024"


@pytest.fixture
def user_factory(db):
    counter = {"i": 0}

    def _make(**kwargs):
        counter["i"] += 1
        username = kwargs.pop("username", f"user_{counter['i']}")
        password = kwargs.pop("password", PASSWORD)
        user = User.objects.create(username=username, **kwargs)
        user.set_password(password)
        user.save()
        return user

    return _make


@pytest.fixture
def user(db, user_factory):
    return user_factory(username="jane", email="jane@example.com")


@pytest.fixture
def usa(db):
    return Country.objects.create(
        code="USA",
        name="United States of America",
        states={"NY": "New York", "IL": "Illinois"},
    )


@pytest.fixture
def canada(db):
    return Country.objects.create(code="CAN", name="Canada")


@pytest.fixture
def customer_factory(db):
    def _make(user, **kwargs):
        defaults = dict(first_name="Jane", last_name="Doe", phone="5550100")
        defaults.update(kwargs)
        return Customer.objects.create(user=user, **defaults)

    return _make


@pytest.fixture
def address_factory(db):
    def _make(customer, address_type, country, **kwargs):
        defaults = dict(
            address1="Old street 1",
            city="Old city",
            zipcode="00000",
        )
        defaults.update(kwargs)
        return CustomerAddress.objects.create(
            customer=customer, type=address_type, country=country, **defaults
        )

    return _make


@pytest.fixture
def profile_payload(usa, canada):
    return {
        "first_name": "Jane",
        "last_name": "Doe",
        "phone": "+1 555 0100",
        "shipping": {
            "address1": "1 Rd",
            "city": "New York",
            "state": "NY",
            "zipcode": "10001",
            "country_id": usa.id,
        },
        "billing": {
            "address1": "2 Rd",
            "address2": "Suite 5",
            "city": "Toronto",
            "zipcode": "M5H 2N2",
            "country_id": canada.id,
        },
    }


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client
