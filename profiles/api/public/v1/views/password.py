# profiles/api/public/v1/views/password.py

from django.contrib.auth import update_session_auth_hash
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from profiles.api.public.v1.schema import PASSWORD_UPDATE_SCHEMA
from profiles.api.public.v1.serializers import PasswordUpdateSerializer
from profiles.utils.consts import PASSWORD_UPDATED_MESSAGE
from .mixins import (
    FlashMessageMixin,
    ProfileServiceMixin,
    UnprocessableResponseMixin,
)


class PasswordUpdateView(
    ProfileServiceMixin, FlashMessageMixin, UnprocessableResponseMixin,
    APIView
):
    permission_classes = [IsAuthenticated]
    serializer_class = PasswordUpdateSerializer
    hidden_input_fields = (
        "current_password", "new_password", "new_password_confirmation"
    )

    @PASSWORD_UPDATE_SCHEMA
    def post(self, request):
        serializer = self.serializer_class(
            data=request.data, context={"request": request}
        )
        if not serializer.is_valid():
            return self.unprocessable_response(serializer)

        user = self.get_service().update_password(
            request.user, serializer.validated_data["new_password"]
        )
        # Keep the current session logged in after the hash changes.
        update_session_auth_hash(request, user)
        self.flash(PASSWORD_UPDATED_MESSAGE)
        return Response(status=status.HTTP_204_NO_CONTENT)
