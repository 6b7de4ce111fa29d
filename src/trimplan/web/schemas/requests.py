"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class OptimizeRequest(BaseModel):
    """Request for computing a cutting plan."""

    config: dict[str, Any] = Field(..., description="Plan configuration JSON")
    strict: bool = Field(
        default=False, description="Fail instead of dropping an unplaceable piece"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Plan configuration JSON")
