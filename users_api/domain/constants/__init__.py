"""Constants for domain model field names"""

from .user_fields import (
    UserFields,
    UNSAVED_ID,
    NAME_MIN_LENGTH,
    NAME_MAX_LENGTH,
    EMAIL_MIN_LENGTH,
    ID_MIN,
    ID_MAX,
)

__all__ = [
    "UserFields",
    "UNSAVED_ID",
    "NAME_MIN_LENGTH",
    "NAME_MAX_LENGTH",
    "EMAIL_MIN_LENGTH",
    "ID_MIN",
    "ID_MAX",
]
