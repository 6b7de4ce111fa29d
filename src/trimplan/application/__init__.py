"""Application layer - use cases and configuration."""

from .commands import OptimizeCutPlanCommand
from .dtos import PlanOutput

__all__ = [
    "OptimizeCutPlanCommand",
    "PlanOutput",
]
