# External package imports
from sqlalchemy import Column, Integer, MetaData, String, Table, Text

# Local application imports
from ...domain.constants import UserFields, NAME_MAX_LENGTH


metadata = MetaData()

# Mirrors the externally managed schema. sqlite_autoincrement keeps SQLite
# from handing out the id of a deleted row again.
users_table = Table(
    UserFields.TABLE,
    metadata,
    Column(UserFields.ID, Integer, primary_key=True, autoincrement=True),
    Column(UserFields.NAME, String(NAME_MAX_LENGTH), nullable=False),
    Column(UserFields.EMAIL, Text, nullable=False),
    sqlite_autoincrement=True,
)
