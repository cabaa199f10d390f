# profiles/validators.py

import re

from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _


class DigitAndSymbolPasswordValidator:
    """Require at least one digit and one non-alphanumeric character."""

    def validate(self, password, user=None):
        errors = []
        if not re.search(r"\d", password):
            errors.append(ValidationError(
                _("The password must contain at least one number."),
                code="password_no_number",
            ))
        if not re.search(r"[^\w\s]|_", password):
            errors.append(ValidationError(
                _("The password must contain at least one symbol."),
                code="password_no_symbol",
            ))
        if errors:
            raise ValidationError(errors)

    def get_help_text(self):
        return _(
            "Your password must contain at least one number and one symbol."
        )
