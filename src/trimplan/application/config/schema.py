"""Pydantic models for cutting plan configuration files.

A configuration file describes one planning run: the wall measurements,
the stock lengths on offer, the saw kerf, and how to present the result.

Example:
    {
        "version": "1.0",
        "measurements": [
            {"room": "Living Room", "wall": "North", "size": "132 1/4"},
            {"room": "Hallway", "size": 45.5}
        ],
        "available_lengths": [96, 120, 144],
        "kerf": 0.125
    }
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from trimplan.domain.value_objects import (
    DEFAULT_BOARD_LENGTHS,
    DEFAULT_KERF,
    SplitPolicy,
    parse_length,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class OutputFormat(str, Enum):
    """Sections of the plan to render."""

    ALL = "all"
    PLAN = "plan"
    SHOPPING = "shopping"
    SUMMARY = "summary"
    JSON = "json"


class MeasurementConfig(BaseModel):
    """A single wall measurement.

    Attributes:
        id: Identifier; assigned from position (M1, M2, ...) when omitted.
        size: Length in inches, as a number or a tape-measure string such as
            "83 5/16". Zero marks a blank row that is ignored.
        room: Optional room label.
        wall: Optional wall label.
        split: How to divide the piece if it is longer than every board.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, min_length=1, description="Measurement id")
    size: float = Field(..., ge=0, description="Length in inches")
    room: str | None = Field(default=None, description="Room label")
    wall: str | None = Field(default=None, description="Wall label")
    split: SplitPolicy = Field(
        default=SplitPolicy.GREEDY,
        description="Split policy for measurements longer than every board",
    )

    @field_validator("size", mode="before")
    @classmethod
    def parse_size(cls, v: Any) -> Any:
        """Accept tape-measure strings like '83 5/16'."""
        if isinstance(v, str):
            return parse_length(v)
        return v


class OutputConfig(BaseModel):
    """How the plan is presented.

    Attributes:
        format: Section(s) to render.
        room: Only show boards holding a cut from this room.
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = Field(default=OutputFormat.ALL, description="Output format")
    room: str | None = Field(default=None, description="Room to focus on")


class PlanConfiguration(BaseModel):
    """Root configuration for a cutting plan.

    Attributes:
        version: Schema version.
        measurements: Wall measurements in input order.
        available_lengths: Purchasable board lengths in inches.
        kerf: Saw kerf in inches.
        snap_to_sixteenth: Round measurement sizes to the nearest 1/16".
        output: Presentation options.
    """

    model_config = ConfigDict(extra="forbid")

    version: str = Field(default="1.0", description="Schema version")
    measurements: list[MeasurementConfig] = Field(
        default_factory=list, description="Wall measurements"
    )
    available_lengths: list[float] = Field(
        default_factory=lambda: list(DEFAULT_BOARD_LENGTHS),
        description="Purchasable board lengths in inches",
    )
    kerf: float = Field(default=DEFAULT_KERF, ge=0, description="Saw kerf in inches")
    snap_to_sixteenth: bool = Field(
        default=True, description="Round measurements to the nearest 1/16 inch"
    )
    output: OutputConfig = Field(
        default_factory=OutputConfig, description="Output options"
    )

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(f"Unsupported version '{v}'. Supported: {supported}")
        return v

    @field_validator("available_lengths")
    @classmethod
    def validate_lengths(cls, v: list[float]) -> list[float]:
        for length in v:
            if length <= 0:
                raise ValueError("Board lengths must be positive")
        return v
