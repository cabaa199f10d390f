# profiles/api/public/v1/serializers/password.py

from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from profiles.utils.consts import password_requires_current


class PasswordUpdateSerializer(serializers.Serializer):
    current_password = serializers.CharField(
        write_only=True, required=False, allow_blank=True,
        trim_whitespace=False
    )
    new_password = serializers.CharField(
        write_only=True, trim_whitespace=False
    )
    new_password_confirmation = serializers.CharField(
        write_only=True, trim_whitespace=False
    )

    def validate_new_password(self, value):
        try:
            password_validation.validate_password(
                password=value, user=self.context["request"].user
            )
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.messages)
        return value

    def validate(self, data):
        user = self.context["request"].user

        if password_requires_current():
            current_password = data.get("current_password")
            if not current_password:
                raise serializers.ValidationError(
                    {"current_password": _("This field is required.")}
                )
            if not user.check_password(current_password):
                raise serializers.ValidationError(
                    {"current_password": _("The current password is incorrect.")}
                )

        if data["new_password"] != data["new_password_confirmation"]:
            raise serializers.ValidationError(
                {"new_password_confirmation": _(
                    "The new password confirmation does not match."
                )}
            )

        return data
