from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface - defines contract for user data access.

    Implementations raise ``RepositoryError`` for any storage failure.
    """

    @abstractmethod
    async def save(self, user: User) -> User:
        """Persist a new user and return it with its assigned ID"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find user by ID, None if absent"""
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every user ordered by ascending ID"""
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Delete user by ID; a missing ID is not an error"""
        pass
