"""ASGI application serving cutting plans."""

from typing import Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trimplan.web.exceptions import register_exception_handlers
from trimplan.web.routers import optimize_router, validate_router

API_PREFIX = "/api/v1"


async def health() -> dict[str, str]:
    """Liveness check for load balancers."""
    return {"status": "healthy"}


def create_app(allowed_origins: Sequence[str] = ("*",)) -> FastAPI:
    """Build the planning API.

    Args:
        allowed_origins: Browser origins allowed to call the API.
    """
    app = FastAPI(
        title="Trim Planner API",
        description="Minimal-waste baseboard cutting plans",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(allowed_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (optimize_router, validate_router):
        app.include_router(router, prefix=API_PREFIX)
    app.add_api_route("/health", health, methods=["GET"], tags=["health"])

    return app


app = create_app()
