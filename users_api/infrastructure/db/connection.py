# Standard library imports
import logging
from typing import Any, Dict

# External package imports
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

# Local application imports
from ...core.config import Settings
from .tables import metadata

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Build the shared async engine (connection pool) for the process
    
    Args:
        settings: Application settings carrying DATABASE_URL and pool tuning
        
    Returns:
        AsyncEngine; connections are opened lazily on first use
        
    Raises:
        RuntimeError: If DATABASE_URL is not configured
    """
    if not settings.database_url:
        raise RuntimeError("DATABASE_URL not set. Please configure it in your .env file.")
    
    url = make_url(settings.database_url)
    engine_kwargs: Dict[str, Any] = {"pool_pre_ping": True}
    
    if url.get_backend_name() == "sqlite":
        # In-memory SQLite only lives as long as its single connection
        if url.database in (None, "", ":memory:"):
            engine_kwargs["poolclass"] = StaticPool
    else:
        # Values are conservative; tune through DB_POOL_* env vars
        engine_kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_recycle=settings.db_pool_recycle,
        )
    
    engine = create_async_engine(url, **engine_kwargs)
    logger.info(f"Database engine created for {url.render_as_string(hide_password=True)}")
    return engine


async def init_schema(engine: AsyncEngine) -> None:
    """Create the users table if it does not exist yet (development/tests)"""
    async with engine.begin() as connection:
        await connection.run_sync(metadata.create_all)
