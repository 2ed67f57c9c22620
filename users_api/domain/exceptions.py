"""Domain-level exceptions.

Validation failures raised while constructing entities derive from
``DomainError``. Storage ports signal engine failures with
``RepositoryError`` so callers never depend on a concrete driver's
exception types.
"""
from typing import Optional


class DomainError(ValueError):
    """Base class for entity invariant violations."""

    message = "Invalid user data"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class InvalidNameError(DomainError):
    """Name is empty or longer than the allowed maximum."""

    message = "Name must be between 1 and 100 characters"


class InvalidEmailError(DomainError):
    """Email does not look like an address."""

    message = "Invalid email format"


class RepositoryError(Exception):
    """A storage engine failed to complete an operation."""
