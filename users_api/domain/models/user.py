from dataclasses import dataclass, replace

from ..constants import UNSAVED_ID, NAME_MIN_LENGTH, NAME_MAX_LENGTH, EMAIL_MIN_LENGTH
from ..exceptions import InvalidNameError, InvalidEmailError


@dataclass(frozen=True)
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: int
    name: str
    email: str

    @classmethod
    def create(cls, name: str, email: str) -> "User":
        """
        Build a new, not yet persisted user

        Args:
            name: Display name, 1-100 characters
            email: Address containing "@", at least 3 characters

        Returns:
            User carrying the unsaved sentinel id

        Raises:
            InvalidNameError: If name length is out of range
            InvalidEmailError: If email fails the format check
        """
        if len(name) < NAME_MIN_LENGTH or len(name) > NAME_MAX_LENGTH:
            raise InvalidNameError()

        # Deliberately loose: not an RFC 5322 check
        if "@" not in email or len(email) < EMAIL_MIN_LENGTH:
            raise InvalidEmailError()

        return cls(id=UNSAVED_ID, name=name, email=email)

    def with_id(self, user_id: int) -> "User":
        """Return a copy carrying the identifier assigned by storage"""
        return replace(self, id=user_id)

    @property
    def is_persisted(self) -> bool:
        return self.id != UNSAVED_ID
