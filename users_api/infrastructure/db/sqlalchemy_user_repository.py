# Standard library imports
import logging
from typing import Any, List, Optional

# External package imports
from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.exceptions import RepositoryError
from .tables import users_table

logger = logging.getLogger(__name__)

# Connectivity problems (refused connections, timeouts) can surface from the
# driver as OSError before SQLAlchemy wraps them
_STORAGE_FAILURES = (SQLAlchemyError, OSError)


class SqlAlchemyUserRepository(UserRepository):
    """Relational implementation of UserRepository on a SQLAlchemy async engine"""
    
    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
    
    async def save(self, user: User) -> User:
        """
        Insert a new user row
        
        Args:
            user: Validated User domain model (sentinel ID)
            
        Returns:
            New User instance carrying the engine-assigned ID
        """
        statement = insert(users_table).values(name=user.name, email=user.email)
        try:
            async with self.engine.begin() as connection:
                result = await connection.execute(statement)
                new_id = result.inserted_primary_key[0]
        except _STORAGE_FAILURES as e:
            raise self._storage_error("save", e) from e
        
        return user.with_id(int(new_id))
    
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        statement = select(users_table).where(users_table.c.id == user_id)
        try:
            async with self.engine.connect() as connection:
                result = await connection.execute(statement)
                row = result.first()
        except _STORAGE_FAILURES as e:
            raise self._storage_error("find_by_id", e) from e
        
        if row is None:
            return None
        return self._row_to_user(row)
    
    async def find_all(self) -> List[User]:
        """Return all users ordered by ascending ID"""
        statement = select(users_table).order_by(users_table.c.id.asc())
        try:
            async with self.engine.connect() as connection:
                result = await connection.execute(statement)
                rows = result.all()
        except _STORAGE_FAILURES as e:
            raise self._storage_error("find_all", e) from e
        
        return [self._row_to_user(row) for row in rows]
    
    async def delete(self, user_id: int) -> None:
        """Delete user by ID (no-op when the row is already gone)"""
        statement = delete(users_table).where(users_table.c.id == user_id)
        try:
            async with self.engine.begin() as connection:
                await connection.execute(statement)
        except _STORAGE_FAILURES as e:
            raise self._storage_error("delete", e) from e
    
    def _row_to_user(self, row: Any) -> User:
        """
        Convert a users row to User domain model
        
        Rows were validated on the way in, so the constructor is used
        directly rather than User.create.
        """
        return User(id=int(row.id), name=row.name, email=row.email)
    
    def _storage_error(self, operation: str, error: Exception) -> RepositoryError:
        logger.error(f"Error during user {operation}: {error}")
        return RepositoryError(f"User {operation} failed")
