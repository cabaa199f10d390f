# customers/admin/customer.py
from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from customers.models import Customer, CustomerAddress
from utils.admin import BaseAdmin


class CustomerAddressInline(admin.StackedInline):
    model = CustomerAddress
    extra = 0
    max_num = len(CustomerAddress.Type.choices)
    can_delete = False
    fields = (
        "type", "address1", "address2", "city", "state", "zipcode", "country"
    )
    autocomplete_fields = ("country",)


@admin.register(Customer)
class CustomerAdmin(BaseAdmin):
    list_display = (
        "user",
        "full_name_display",
        "phone",
        "status",
        "created_at",
    )
    list_filter = ("status",)
    search_fields = (
        "first_name", "last_name", "phone", "user__username", "user__email"
    )
    raw_id_fields = ("user",)
    ordering = ("-created_at",)
    inlines = [CustomerAddressInline]

    fieldsets = (
        (_("Customer"), {
            "fields": ("user", "first_name", "last_name", "phone", "status")
        }),
        (_("Timestamps"), {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    @admin.display(description=_("Name"), ordering="last_name")
    def full_name_display(self, obj):
        return obj.full_name
