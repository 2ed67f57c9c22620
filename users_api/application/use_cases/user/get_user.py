# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from ...errors import AppError, translate_errors


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: int) -> UserResponse:
        """
        Get a user by ID
        
        Raises:
            AppError: NOT_FOUND if no such user, DATABASE on storage failure
        """
        with translate_errors():
            user = await self.user_repository.find_by_id(user_id)
        
        if user is None:
            raise AppError.not_found()
        
        return UserResponse.from_domain(user)
