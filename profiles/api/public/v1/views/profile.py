# profiles/api/public/v1/views/profile.py

from django.shortcuts import redirect
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from profiles.api.public.v1.schema import (
    PROFILE_UPDATE_SCHEMA,
    PROFILE_VIEW_SCHEMA,
)
from profiles.api.public.v1.serializers import (
    ProfileUpdateSerializer,
    ProfileViewSerializer,
)
from profiles.utils.consts import PROFILE_UPDATED_MESSAGE
from .mixins import (
    FlashMessageMixin,
    ProfileServiceMixin,
    UnprocessableResponseMixin,
)


class ProfileView(
    ProfileServiceMixin, FlashMessageMixin, UnprocessableResponseMixin,
    APIView
):
    permission_classes = [IsAuthenticated]
    serializer_class = ProfileUpdateSerializer

    @PROFILE_VIEW_SCHEMA
    def get(self, request):
        view_model = self.get_service().build_profile_view(request.user)
        data = dict(ProfileViewSerializer(view_model).data)
        data["flash_message"] = self.consume_flash()
        return Response(data)

    @PROFILE_UPDATE_SCHEMA
    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            return self.unprocessable_response(serializer)

        self.get_service().update_profile(
            request.user, serializer.validated_data
        )
        self.flash(PROFILE_UPDATED_MESSAGE)
        return redirect("profiles_public_v1:profile")
