from .connection import create_engine_from_settings, init_schema
from .tables import metadata, users_table
from .sqlalchemy_user_repository import SqlAlchemyUserRepository

__all__ = [
    "create_engine_from_settings",
    "init_schema",
    "metadata",
    "users_table",
    "SqlAlchemyUserRepository",
]
