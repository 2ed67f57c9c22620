from .user_dto import CreateUserRequest, UserResponse
from .error_dto import ErrorBody, ErrorResponse

__all__ = [
    "CreateUserRequest",
    "UserResponse",
    "ErrorBody",
    "ErrorResponse",
]
