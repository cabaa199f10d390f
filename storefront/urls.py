"""
URL configuration for storefront project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.0/topics/http/urls/
"""

from django.contrib import admin
from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView,
)
from rest_framework.permissions import AllowAny


# ───────────────────────────────
# Healthcheck endpoints
# ───────────────────────────────
def healthz(_request):
    """Simple health check: always returns 200 OK."""
    return JsonResponse({"status": "ok"})


def readyz(_request):
    """Readiness check: verifies DB connection is available."""
    try:
        connections["default"].cursor()
        return JsonResponse({"status": "ready"})
    except OperationalError:
        return JsonResponse({"status": "db_down"}, status=500)


# ───────────────────────────────
# Core URL patterns
# ───────────────────────────────
api_urlpatterns = [
    path("api/profiles/", include("profiles.api.urls")),
]

schema_urlpatterns = [
    path(
        "api/schema/",
        SpectacularAPIView.as_view(
            permission_classes=[AllowAny], authentication_classes=[]
        ),
        name="schema"
    ),
    path(
        "api/schema/swagger/",
        SpectacularSwaggerView.as_view(
            url_name="schema", permission_classes=[AllowAny]
        ),
        name="swagger-ui",
    ),
    path(
        "api/schema/redoc/",
        SpectacularRedocView.as_view(
            url_name="schema", permission_classes=[AllowAny]
        ),
        name="redoc",
    ),
]

urlpatterns = [
    path("admin/", admin.site.urls),
    path("healthz", healthz),
    path("readyz", readyz),
] + api_urlpatterns + schema_urlpatterns

admin.site.enable_nav_sidebar = False
admin.site.index_title = "Storefront"
