# profiles/api/public/v1/serializers/profile.py

from django.contrib.auth import get_user_model
from django.core.validators import RegexValidator
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from customers.models import Customer
from .address import AddressInputSerializer, AddressSerializer, \
    CountrySerializer

phone_validator = RegexValidator(
    regex=r"^\+?(?=.*\d)[0-9\s\-\(\)]{7,32}$",
    message=_("Please enter a valid phone number.")
)


class ProfileUpdateSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=50)
    last_name = serializers.CharField(max_length=50)
    phone = serializers.CharField(
        min_length=7, max_length=32, validators=[phone_validator]
    )
    shipping = AddressInputSerializer()
    billing = AddressInputSerializer()


class UserSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = get_user_model()
        fields = ["id", "username", "email"]
        read_only_fields = fields


class CustomerSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Customer
        fields = ["user_id", "first_name", "last_name", "phone", "status"]
        read_only_fields = fields


class ProfileViewSerializer(serializers.Serializer):
    """Read-only representation of `ProfileViewModel`."""
    user = UserSummarySerializer(read_only=True)
    customer = CustomerSerializer(read_only=True, allow_null=True)
    shipping_address = AddressSerializer(read_only=True)
    billing_address = AddressSerializer(read_only=True)
    countries = CountrySerializer(many=True, read_only=True)
