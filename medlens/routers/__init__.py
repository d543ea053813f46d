"""FastAPI routers."""

from medlens.routers.health import router as health_router
from medlens.routers.documents import router as documents_router
from medlens.routers.alerts import router as alerts_router
from medlens.routers.insights import router as insights_router

__all__ = ["health_router", "documents_router", "alerts_router", "insights_router"]
