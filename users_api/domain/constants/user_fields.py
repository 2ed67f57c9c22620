"""Constants for User model field names and limits"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"

    # Relational table name
    TABLE = "users"


# Identifier carried by a User that has not been persisted yet
UNSAVED_ID = 0

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 100
EMAIL_MIN_LENGTH = 3

# Range of the 32-bit INTEGER id column
ID_MIN = -(2 ** 31)
ID_MAX = 2 ** 31 - 1
