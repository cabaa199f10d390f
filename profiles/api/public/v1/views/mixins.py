# profiles/api/public/v1/views/mixins.py

from rest_framework import status
from rest_framework.response import Response

from profiles.services import ProfileService
from profiles.utils.consts import get_flash_key
from profiles.utils.flash import FlashStore


class ProfileServiceMixin:
    service_class = ProfileService

    def get_service(self) -> ProfileService:
        return self.service_class()


class FlashMessageMixin:

    @property
    def flash_key(self) -> str:
        return get_flash_key()

    def get_flash_store(self) -> FlashStore:
        return FlashStore(self.request.session)

    def flash(self, message) -> None:
        self.get_flash_store().set_once(self.flash_key, message)

    def consume_flash(self):
        return self.get_flash_store().consume_once(self.flash_key)


class UnprocessableResponseMixin:
    """
    Validation failures answer 422 with the field errors and the submitted
    input, minus any field listed in `hidden_input_fields`.
    """
    hidden_input_fields = ()

    def unprocessable_response(self, serializer) -> Response:
        submitted = serializer.initial_data
        if not hasattr(submitted, "items"):
            submitted = {}
        return Response(
            {
                "success": False,
                "errors": serializer.errors,
                "input": {
                    key: value for key, value in submitted.items()
                    if key not in self.hidden_input_fields
                },
            },
            status=status.HTTP_422_UNPROCESSABLE_ENTITY
        )
