from app.api.routes.hooks import router as hooks_router
from app.api.routes.vendors import router as vendors_router

__all__ = ["hooks_router", "vendors_router"]
