"""API routers for the REST API."""

from trimplan.web.routers.optimize import router as optimize_router
from trimplan.web.routers.validate import router as validate_router

__all__ = [
    "optimize_router",
    "validate_router",
]
