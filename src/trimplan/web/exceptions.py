"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from trimplan.application.config import ConfigError
from trimplan.infrastructure.bin_packing import UnplaceablePieceError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid configuration",
                "error_type": exc.error_type,
                "details": [
                    {
                        "path": detail.get("path"),
                        "message": detail.get("message"),
                    }
                    for detail in exc.details
                ],
            },
        )

    @app.exception_handler(UnplaceablePieceError)
    async def unplaceable_piece_handler(
        request: Request, exc: UnplaceablePieceError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "unplaceable_piece",
                "details": {"measurement_id": exc.measurement_id, "size": exc.size},
            },
        )
