# customers/models/address.py

from django.db import models
from django.utils.translation import gettext_lazy as _

from customers.utils.choices import AddressType
from utils.models import BaseModel
from .country import Country
from .customer import Customer


class CustomerAddress(BaseModel):
    Type = AddressType

    customer = models.ForeignKey(
        Customer,
        on_delete=models.CASCADE,
        related_name="addresses",
        verbose_name=_("Customer")
    )
    type = models.CharField(
        max_length=10,
        choices=Type.choices,
        verbose_name=_("Type")
    )
    address1 = models.CharField(max_length=255, verbose_name=_("Address 1"))
    address2 = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name=_("Address 2")
    )
    city = models.CharField(max_length=255, verbose_name=_("City"))
    state = models.CharField(
        max_length=45,
        blank=True,
        default="",
        verbose_name=_("State")
    )
    zipcode = models.CharField(max_length=45, verbose_name=_("Zip code"))
    country = models.ForeignKey(
        Country,
        on_delete=models.PROTECT,
        related_name="addresses",
        verbose_name=_("Country")
    )

    class Meta:
        verbose_name = _("Customer address")
        verbose_name_plural = _("Customer addresses")
        constraints = [
            models.UniqueConstraint(
                fields=["customer", "type"],
                name="unique_customer_address_type",
            )
        ]

    def __str__(self):
        return f"{self.get_type_display()} address of customer #{self.customer_id}"
