# profiles/api/public/v1/urls.py

from django.urls import path

from .views import PasswordUpdateView, ProfileView

app_name = "profiles_public_v1"

urlpatterns = [
    path("profile/", ProfileView.as_view(), name="profile"),
    path(
        "profile/password/", PasswordUpdateView.as_view(),
        name="profile-password"
    ),
]
