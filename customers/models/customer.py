# customers/models/customer.py
from django.contrib.auth import get_user_model
from django.db import models
from django.utils.translation import gettext_lazy as _

from customers.utils.choices import CustomerStatus
from utils.models import BaseModel


class Customer(BaseModel):
    user = models.OneToOneField(
        get_user_model(),
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="customer",
        verbose_name=_("User")
    )
    first_name = models.CharField(
        max_length=50,
        verbose_name=_("First name"),
    )
    last_name = models.CharField(
        max_length=50,
        verbose_name=_("Last name"),
    )
    phone = models.CharField(
        max_length=32,
        blank=True,
        verbose_name=_("Phone"),
    )
    status = models.CharField(
        max_length=10,
        choices=CustomerStatus.choices,
        default=CustomerStatus.ACTIVE,
        verbose_name=_("Status"),
    )

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    class Meta:
        verbose_name = _("Customer")
        verbose_name_plural = _("Customers")

    def __str__(self):
        return f"Customer: {self.full_name or self.user.get_username()}"
