from .health_controller import router as health_router
from .user_controller import router as user_router


__all__ = ["health_router", "user_router"]
