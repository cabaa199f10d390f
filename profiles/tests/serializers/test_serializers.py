# profiles/tests/serializers/test_serializers.py
import pytest

from customers.models import CustomerAddress
from customers.utils.choices import AddressType
from profiles.api.public.v1.serializers import (
    AddressInputSerializer,
    AddressSerializer,
    ProfileUpdateSerializer,
)


@pytest.mark.django_db
class TestProfileUpdateSerializer:

    def test_valid_payload_resolves_countries(self, profile_payload, usa, canada):
        serializer = ProfileUpdateSerializer(data=profile_payload)

        assert serializer.is_valid(), serializer.errors
        data = serializer.validated_data
        assert data["shipping"]["country"] == usa
        assert data["billing"]["country"] == canada
        assert data["billing"]["state"] == ""
        assert data["shipping"]["address2"] == ""

    def test_empty_payload_lists_every_required_field(self):
        serializer = ProfileUpdateSerializer(data={})

        assert not serializer.is_valid()
        assert set(serializer.errors) == {
            "first_name", "last_name", "phone", "shipping", "billing"
        }

    def test_type_is_not_an_input_field(self, canada):
        serializer = AddressInputSerializer(data={
            "address1": "1 Rd", "city": "Toronto", "zipcode": "M5H",
            "country_id": canada.id, "type": "billing",
        })

        assert serializer.is_valid(), serializer.errors
        assert "type" not in serializer.validated_data

    def test_country_without_states_accepts_any_state(self, canada):
        serializer = AddressInputSerializer(data={
            "address1": "1 Rd", "city": "Toronto", "zipcode": "M5H",
            "state": "Ontario", "country_id": canada.id,
        })

        assert serializer.is_valid(), serializer.errors


class TestAddressSerializer:

    def test_placeholder_renders_empty_fields(self):
        data = AddressSerializer(
            CustomerAddress(type=AddressType.BILLING)
        ).data

        assert data["id"] is None
        assert data["type"] == "billing"
        assert data["address1"] == ""
        assert data["country_id"] is None
