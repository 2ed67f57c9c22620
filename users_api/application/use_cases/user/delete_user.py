# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...errors import AppError, translate_errors

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: int) -> None:
        """
        Delete a user by ID
        
        The existence check and the delete are two separate round trips, so
        a concurrent delete of the same ID can turn the second one into a
        no-op. Callers still get NOT_FOUND for IDs that were never there.
        
        Raises:
            AppError: NOT_FOUND if no such user, DATABASE on storage failure
        """
        with translate_errors():
            existing_user = await self.user_repository.find_by_id(user_id)
            if existing_user is None:
                raise AppError.not_found()
            
            await self.user_repository.delete(user_id)
        
        logger.info(f"Deleted user {user_id}")
