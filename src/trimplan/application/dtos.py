"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from trimplan.infrastructure.bin_packing import PackingWarning, PlanResult


@dataclass
class PlanOutput:
    """Output of the optimize use case.

    Attributes:
        result: The full cutting plan.
        warnings: Recoverable problems found while planning.
        room: Room the caller wants to focus on, if any.
    """

    result: PlanResult
    warnings: list[PackingWarning] = field(default_factory=list)
    room: str | None = None

    @property
    def plan(self) -> PlanResult:
        """The plan to present: the full plan or the focused room's boards."""
        if self.room:
            return self.result.for_room(self.room)
        return self.result

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0
