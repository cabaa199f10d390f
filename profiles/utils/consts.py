from django.conf import settings
from django.utils.translation import gettext_lazy as _

DEFAULT_FLASH_KEY = "flash_message"
DEFAULT_PASSWORD_REQUIRE_CURRENT = True

PROFILE_UPDATED_MESSAGE = _("Profile was successfully updated.")
PASSWORD_UPDATED_MESSAGE = _("Your password was successfully updated.")


def get_setting(name, default):
    return getattr(settings, name, default)


def get_flash_key() -> str:
    return get_setting(
        "PROFILE_FLASH_KEY",
        DEFAULT_FLASH_KEY
    )


def password_requires_current() -> bool:
    return get_setting(
        "PROFILE_PASSWORD_REQUIRE_CURRENT",
        DEFAULT_PASSWORD_REQUIRE_CURRENT
    )
