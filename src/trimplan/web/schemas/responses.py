"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class CutSchema(BaseModel):
    """A cut on a board."""

    id: str = Field(..., description="Measurement id")
    size: float = Field(..., description="Cut length in inches")
    room: str | None = Field(default=None, description="Room label")
    wall: str | None = Field(default=None, description="Wall label")
    offset: float = Field(..., description="Start position along the board in inches")


class BoardSchema(BaseModel):
    """A purchased board with its cuts."""

    name: str | None = Field(default=None, description="Board display name")
    length: float = Field(..., description="Board length in inches")
    used: float = Field(..., description="Length used by cuts and kerf")
    waste: float = Field(..., description="Leftover length in inches")
    cuts: list[CutSchema] = Field(default_factory=list, description="Cuts in order")


class PlanSummarySchema(BaseModel):
    """Totals for a plan."""

    total_boards: int = Field(..., description="Number of boards to buy")
    board_counts: dict[str, int] = Field(
        default_factory=dict, description="Boards to buy keyed by length"
    )
    total_waste: float = Field(..., description="Total leftover length in inches")
    average_waste: float = Field(..., description="Average leftover per board")


class PlanWarningSchema(BaseModel):
    """A recoverable planning problem."""

    code: str = Field(..., description="Warning code")
    message: str = Field(..., description="Warning message")
    measurement_id: str | None = Field(default=None, description="Affected measurement")


class PlanResponseSchema(BaseModel):
    """Response for plan computation."""

    boards: list[BoardSchema] = Field(default_factory=list, description="Boards")
    summary: PlanSummarySchema = Field(..., description="Plan totals")
    warnings: list[PlanWarningSchema] = Field(
        default_factory=list, description="Planning warnings"
    )
    room: str | None = Field(default=None, description="Room the plan is focused on")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )
