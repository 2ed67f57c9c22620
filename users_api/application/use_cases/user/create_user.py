# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ...dto.user_dto import CreateUserRequest, UserResponse
from ...errors import translate_errors

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """
        Create a new user
        
        Args:
            request: Creation request with name and email
            
        Returns:
            UserResponse with the persisted user, including its new ID
            
        Raises:
            AppError: DOMAIN if name/email are invalid (nothing is stored),
                DATABASE if the insert fails
        """
        with translate_errors():
            new_user = User.create(request.name, request.email)
            saved_user = await self.user_repository.save(new_user)
        
        logger.info(f"Created user {saved_user.id}")
        return UserResponse.from_domain(saved_user)
