# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from ...errors import translate_errors


class ListUsersUseCase:
    """Use case for listing all users"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self) -> List[UserResponse]:
        """List all users in repository order (ascending ID)"""
        with translate_errors():
            users = await self.user_repository.find_all()
        
        return [UserResponse.from_domain(user) for user in users]
