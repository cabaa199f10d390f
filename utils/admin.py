# utils/admin.py

from django.contrib import admin


class BaseAdmin(admin.ModelAdmin):
    """
    Shared admin defaults: timestamps are always read-only and listed last.
    """
    list_per_page = 50
    timestamp_fields = ("created_at", "updated_at")

    def get_readonly_fields(self, request, obj=None):
        readonly = list(super().get_readonly_fields(request, obj))
        return readonly + [
            f for f in self.timestamp_fields if f not in readonly
        ]
