"""FastAPI dependency injection for planning services."""

from typing import Annotated

from fastapi import Depends

from trimplan.application.commands import OptimizeCutPlanCommand


def get_optimize_command() -> OptimizeCutPlanCommand:
    """Dependency for OptimizeCutPlanCommand."""
    return OptimizeCutPlanCommand()


OptimizeCommandDep = Annotated[OptimizeCutPlanCommand, Depends(get_optimize_command)]
