from .profile import (
    PASSWORD_UPDATE_SCHEMA,
    PROFILE_UPDATE_SCHEMA,
    PROFILE_VIEW_SCHEMA,
)
