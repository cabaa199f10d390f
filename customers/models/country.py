# customers/models/country.py

from django.db import models
from django.utils.translation import gettext_lazy as _


class Country(models.Model):
    code = models.CharField(
        max_length=3,
        unique=True,
        help_text=_("ISO 3166-1 alpha-3, e.g. USA"),
        verbose_name=_("Code")
    )
    name = models.CharField(max_length=255, verbose_name=_("Name"))
    states = models.JSONField(
        null=True,
        blank=True,
        help_text=_('State code to name, e.g. {"NY": "New York"}'),
        verbose_name=_("States")
    )

    def has_state(self, state_code: str) -> bool:
        """Countries without a states table accept any value."""
        if not self.states:
            return True
        return state_code in self.states

    def __str__(self):
        return self.name

    class Meta:
        verbose_name = _("Country")
        verbose_name_plural = _("Countries")
        ordering = ["name", "id"]
