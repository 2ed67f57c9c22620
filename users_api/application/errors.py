"""
Application error taxonomy.

Every use case reports failures as ``AppError`` tagged with one of three
kinds. ``translate_errors`` is the only place where lower-layer exceptions
are turned into application errors.
"""
# Standard library imports
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator

# Local application imports
from ..domain.exceptions import DomainError, RepositoryError

logger = logging.getLogger(__name__)


class AppErrorKind(str, Enum):
    """Kinds of application failure"""
    DOMAIN = "domain"
    DATABASE = "database"
    NOT_FOUND = "not_found"


class AppError(Exception):
    """Failure of a use case, tagged with its kind"""
    
    def __init__(self, kind: AppErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
    
    @classmethod
    def domain(cls, error: DomainError) -> "AppError":
        return cls(AppErrorKind.DOMAIN, str(error))
    
    @classmethod
    def database(cls, error: RepositoryError) -> "AppError":
        return cls(AppErrorKind.DATABASE, f"Database error: {error}")
    
    @classmethod
    def not_found(cls) -> "AppError":
        return cls(AppErrorKind.NOT_FOUND, "User not found")


@contextmanager
def translate_errors() -> Iterator[None]:
    """
    Re-raise domain and storage failures as AppError
    
    Raises:
        AppError: DOMAIN for validation failures, DATABASE for storage failures
    """
    try:
        yield
    except DomainError as e:
        raise AppError.domain(e) from e
    except RepositoryError as e:
        logger.error(f"Storage failure: {e}", exc_info=True)
        raise AppError.database(e) from e
