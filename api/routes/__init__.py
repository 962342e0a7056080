"""API route modules."""

from api.routes.breach import router as breach_router
from api.routes.health import router as health_router

__all__ = ["breach_router", "health_router"]
