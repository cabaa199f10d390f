# profiles/api/public/v1/schema/profile.py
# Centralized OpenAPI schemas for the profile endpoints.

from drf_spectacular.utils import (
    extend_schema, OpenApiResponse,
    OpenApiExample,
)

from profiles.api.public.v1.serializers import (
    PasswordUpdateSerializer,
    ProfileUpdateSerializer,
    ProfileViewSerializer,
)

_VALIDATION_ERROR_EXAMPLE = OpenApiExample(
    "ValidationError",
    value={
        "success": False,
        "errors": {
            "first_name": ["This field is required."],
            "shipping": {"country_id": ["This field is required."]},
        },
        "input": {"last_name": "Doe"},
    },
)

PROFILE_VIEW_SCHEMA = extend_schema(
    tags=["Profile"],
    summary="Get profile",
    description=(
        "Returns the authenticated user's profile, shipping and billing "
        "addresses (unsaved placeholders when missing), the country list "
        "ordered by name and the pending flash message, if any."
    ),
    responses={200: ProfileViewSerializer},
)

PROFILE_UPDATE_SCHEMA = extend_schema(
    tags=["Profile"],
    summary="Update profile",
    description=(
        "Creates or updates the customer record and both addresses, then "
        "redirects to the profile view."
    ),
    request=ProfileUpdateSerializer,
    responses={
        302: OpenApiResponse(description="Redirect to the profile view."),
        422: OpenApiResponse(
            description="Validation failed.",
            examples=[_VALIDATION_ERROR_EXAMPLE],
        ),
    },
    examples=[
        OpenApiExample(
            "Request",
            value={
                "first_name": "Jane",
                "last_name": "Doe",
                "phone": "+1 555 0100",
                "shipping": {
                    "address1": "1 Rd",
                    "city": "Springfield",
                    "state": "IL",
                    "zipcode": "62701",
                    "country_id": 1,
                },
                "billing": {
                    "address1": "2 Rd",
                    "city": "Springfield",
                    "state": "IL",
                    "zipcode": "62701",
                    "country_id": 1,
                },
            },
            request_only=True,
        ),
    ],
)

PASSWORD_UPDATE_SCHEMA = extend_schema(
    tags=["Profile"],
    summary="Change password",
    request=PasswordUpdateSerializer,
    responses={
        204: OpenApiResponse(description="Password changed."),
        422: OpenApiResponse(
            description="Validation failed.",
            examples=[
                OpenApiExample(
                    "WrongCurrent",
                    value={
                        "success": False,
                        "errors": {
                            "current_password": [
                                "The current password is incorrect."
                            ]
                        },
                        "input": {},
                    }
                ),
                OpenApiExample(
                    "Mismatch",
                    value={
                        "success": False,
                        "errors": {
                            "new_password_confirmation": [
                                "The new password confirmation does not match."
                            ]
                        },
                        "input": {},
                    }
                ),
            ],
        ),
    },
)
