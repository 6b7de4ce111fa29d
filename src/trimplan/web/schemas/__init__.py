"""Pydantic schemas for the REST API."""

from trimplan.web.schemas.requests import ConfigValidateRequest, OptimizeRequest
from trimplan.web.schemas.responses import (
    BoardSchema,
    CutSchema,
    PlanResponseSchema,
    PlanSummarySchema,
    PlanWarningSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "OptimizeRequest",
    # Responses
    "BoardSchema",
    "CutSchema",
    "PlanResponseSchema",
    "PlanSummarySchema",
    "PlanWarningSchema",
    "ValidationResultSchema",
]
