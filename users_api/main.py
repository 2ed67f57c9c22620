# Standard library imports
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
import logging

# External package imports
import uvicorn
from fastapi import FastAPI

# Local application imports
from .api.errors import register_exception_handlers
from .api.v1 import health_router, user_router
from .core.config import Settings, load_settings
from .core.logging_config import configure_logging
from .di.container import DIContainer
from .infrastructure.db.connection import create_engine_from_settings, init_schema

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """
        Lifespan context manager for startup/shutdown events.
        
        Creates the connection pool and DI container on startup and
        disposes the pool on shutdown.
        """
        engine = create_engine_from_settings(settings)
        try:
            if settings.create_schema:
                await init_schema(engine)
                logger.info("Database schema ensured")
            
            app.state.container = DIContainer(engine)
            logger.info("Database connected")
            
            yield
        finally:
            await engine.dispose()
            logger.info("Application shutdown complete")
    
    return lifespan


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Settings (loaded from the environment/.env when not given)
    - Logging configuration
    - Error envelope handlers
    - API route registration
    
    Args:
        settings: Explicit settings; tests pass their own
        
    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = load_settings()
    
    configure_logging(settings.log_level)
    
    application = FastAPI(
        title="Users API",
        version="1.0.0",
        description="User create/read/list/delete service",
        lifespan=_build_lifespan(settings)
    )
    application.state.settings = settings
    
    register_exception_handlers(application)
    
    # Register API routers
    application.include_router(health_router)
    application.include_router(user_router, prefix="/api/users")
    
    return application


def run() -> None:
    """Console entry point: serve the API with uvicorn"""
    settings: Settings = app.state.settings
    logger.info(f"Starting server at {settings.server_addr}")
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)


# Create application instance
app = create_application()


if __name__ == "__main__":
    run()
