"""API routers."""
from .alerts import router as alerts_router
from .cameras import router as cameras_router
from .commands import router as commands_router
from .events import router as events_router

__all__ = ["alerts_router", "cameras_router", "commands_router", "events_router"]
