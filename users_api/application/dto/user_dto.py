from pydantic import BaseModel

from ...domain.models.user import User


class CreateUserRequest(BaseModel):
    """DTO for user creation request (validated by the domain, not here)"""
    name: str
    email: str


class UserResponse(BaseModel):
    """DTO for user response"""
    id: int
    name: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, email=user.email)
