from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncEngine

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database provider - single source of truth for the engine"""
    
    @staticmethod
    def register(container: "BaseContainer", engine: AsyncEngine) -> None:
        """
        Register the shared engine (connection pool) in the container.
        Repositories resolve it by the "engine" key.
        """
        container.register_singleton("engine", engine)
