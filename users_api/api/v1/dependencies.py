# External package imports
from fastapi import Request

# Local application imports
from ...di.container import DIContainer


def get_container(request: Request) -> DIContainer:
    """
    FastAPI dependency returning the DI container built at startup
    
    Returns:
        DIContainer stored on the application state by the lifespan
    """
    return request.app.state.container
