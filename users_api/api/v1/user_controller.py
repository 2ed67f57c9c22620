# Standard library imports
from typing import Annotated, List

# External package imports
from fastapi import APIRouter, Depends, Path, Response, status

# Local application imports
from ...application.dto.error_dto import ErrorResponse
from ...application.dto.user_dto import CreateUserRequest, UserResponse
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...di.container import DIContainer
from ...domain.constants import ID_MIN, ID_MAX
from .dependencies import get_container


router = APIRouter(tags=["users"])

_STORAGE_ERROR = {status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}}
_NOT_FOUND_ERROR = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}

# users.id is a 32-bit INTEGER column; larger ids cannot exist
UserId = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}, **_STORAGE_ERROR},
)
async def create_user(
    request: CreateUserRequest,
    container: DIContainer = Depends(get_container),
) -> UserResponse:
    """
    Create a new user
    
    Args:
        request: User creation request (name, email)
        
    Returns:
        UserResponse with the assigned ID
    """
    create_user_use_case = container.get(CreateUserUseCase)
    return await create_user_use_case.execute(request)


@router.get("", response_model=List[UserResponse], responses=_STORAGE_ERROR)
async def list_users(
    container: DIContainer = Depends(get_container),
) -> List[UserResponse]:
    """List all users ordered by ID"""
    list_users_use_case = container.get(ListUsersUseCase)
    return await list_users_use_case.execute()


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={**_NOT_FOUND_ERROR, **_STORAGE_ERROR},
)
async def get_user(
    user_id: UserId,
    container: DIContainer = Depends(get_container),
) -> UserResponse:
    """
    Get a user by ID
    
    Args:
        user_id: ID of the user
        
    Returns:
        UserResponse with user information
    """
    get_user_use_case = container.get(GetUserUseCase)
    return await get_user_use_case.execute(user_id)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND_ERROR, **_STORAGE_ERROR},
)
async def delete_user(
    user_id: UserId,
    container: DIContainer = Depends(get_container),
) -> Response:
    """Delete a user by ID"""
    delete_user_use_case = container.get(DeleteUserUseCase)
    await delete_user_use_case.execute(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
