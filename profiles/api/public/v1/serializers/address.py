# profiles/api/public/v1/serializers/address.py

from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from customers.models import Country, CustomerAddress


class AddressInputSerializer(serializers.Serializer):
    address1 = serializers.CharField(max_length=255)
    address2 = serializers.CharField(
        max_length=255, allow_blank=True, default=""
    )
    city = serializers.CharField(max_length=255)
    state = serializers.CharField(
        max_length=45, allow_blank=True, default=""
    )
    zipcode = serializers.CharField(max_length=45)
    country_id = serializers.PrimaryKeyRelatedField(
        queryset=Country.objects.all(), source="country"
    )

    def validate(self, data):
        country = data["country"]
        if not country.has_state(data.get("state", "")):
            raise serializers.ValidationError(
                {"state": _("Select a valid state for the chosen country.")}
            )
        return data


class AddressSerializer(serializers.ModelSerializer):
    country_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = CustomerAddress
        fields = [
            "id",
            "type",
            "address1",
            "address2",
            "city",
            "state",
            "zipcode",
            "country_id",
        ]
        read_only_fields = fields


class CountrySerializer(serializers.ModelSerializer):
    class Meta:
        model = Country
        fields = ["id", "code", "name", "states"]
