# customers/admin/country.py
from django.contrib import admin

from customers.models import Country


@admin.register(Country)
class CountryAdmin(admin.ModelAdmin):
    list_display = ("name", "code", "has_states")
    search_fields = ("name", "code")
    ordering = ("name",)

    @admin.display(boolean=True)
    def has_states(self, obj):
        return bool(obj.states)
