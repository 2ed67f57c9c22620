# Standard library imports
import os
from pathlib import Path
from typing import Final, Optional

# External package imports
from dotenv import load_dotenv


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad input"""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    Keyword arguments take precedence over the environment, which lets
    tests and embedding code build settings without touching os.environ.
    """
    
    def __init__(
        self,
        database_url: Optional[str] = None,
        server_host: Optional[str] = None,
        server_port: Optional[int] = None,
        create_schema: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        # Database Configuration
        # e.g. postgresql+asyncpg://user:password@db:5432/users
        self.database_url: Final[str] = (
            database_url if database_url is not None else os.getenv("DATABASE_URL", "")
        )
        self.db_pool_size: Final[int] = _env_int("DB_POOL_SIZE", 10)
        self.db_max_overflow: Final[int] = _env_int("DB_MAX_OVERFLOW", 20)
        self.db_pool_timeout: Final[int] = _env_int("DB_POOL_TIMEOUT", 5)
        self.db_pool_recycle: Final[int] = _env_int("DB_POOL_RECYCLE", 1800)
        self.create_schema: Final[bool] = (
            create_schema if create_schema is not None else _env_bool("DB_CREATE_SCHEMA", False)
        )
        
        # Server Configuration
        self.server_host: Final[str] = (
            server_host if server_host is not None else os.getenv("SERVER_HOST", "0.0.0.0")
        )
        self.server_port: Final[int] = (
            server_port if server_port is not None else _env_int("SERVER_PORT", 3000)
        )
        
        # Logging Configuration
        self.log_level: Final[str] = (
            log_level if log_level is not None else os.getenv("LOG_LEVEL", "INFO")
        ).upper()
    
    @property
    def server_addr(self) -> str:
        return f"{self.server_host}:{self.server_port}"


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Load environment variables from .env and build settings
    
    Called once at startup; the returned instance is passed explicitly to
    the components that need it.
    
    Args:
        env_file: Optional path to a .env file (defaults to repository root)
        
    Returns:
        Settings instance with all configuration values
    """
    env_path = env_file or Path(__file__).resolve().parent.parent.parent / ".env"
    load_dotenv(env_path)
    return Settings()
