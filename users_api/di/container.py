# External package imports
from sqlalchemy.ext.asyncio import AsyncEngine

# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database engine (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (UserProvider) - depend on repositories
    
    The engine is created once at startup and handed in explicitly; the
    container itself lives on the FastAPI application state.
    """
    
    def __init__(self, engine: AsyncEngine) -> None:
        super().__init__()
        self.setup(engine)
    
    def setup(self, engine: AsyncEngine) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self, engine)
        RepositoryProvider.register(self)
        UserProvider.register(self)
