"""Cutting plan endpoints."""

from fastapi import APIRouter

from trimplan.application.config import load_config_from_dict
from trimplan.application.dtos import PlanOutput
from trimplan.domain import Board
from trimplan.web.dependencies import OptimizeCommandDep
from trimplan.web.schemas.requests import OptimizeRequest
from trimplan.web.schemas.responses import (
    BoardSchema,
    CutSchema,
    PlanResponseSchema,
    PlanSummarySchema,
    PlanWarningSchema,
)

router = APIRouter(prefix="/optimize", tags=["optimize"])


def _board_to_schema(board: Board) -> BoardSchema:
    return BoardSchema(
        name=board.name,
        length=board.length,
        used=board.used_length,
        waste=board.waste,
        cuts=[
            CutSchema(
                id=cut.id,
                size=cut.size,
                room=cut.room,
                wall=cut.wall,
                offset=offset,
            )
            for offset, cut in zip(board.cut_offsets(), board.cuts)
        ],
    )


def _plan_output_to_schema(output: PlanOutput) -> PlanResponseSchema:
    """Convert PlanOutput to response schema."""
    plan = output.plan
    summary = plan.summary

    return PlanResponseSchema(
        boards=[_board_to_schema(board) for board in plan.boards],
        summary=PlanSummarySchema(
            total_boards=summary.total_boards,
            board_counts={
                f"{length:g}": count for length, count in summary.shopping_list
            },
            total_waste=summary.total_waste,
            average_waste=summary.average_waste,
        ),
        warnings=[
            PlanWarningSchema(
                code=warning.code,
                message=warning.message,
                measurement_id=warning.measurement_id,
            )
            for warning in output.warnings
        ],
        room=output.room,
    )


@router.post("", response_model=PlanResponseSchema)
async def optimize_plan(
    request: OptimizeRequest,
    command: OptimizeCommandDep,
) -> PlanResponseSchema:
    """Compute the cutting plan for a configuration.

    An empty list of board lengths yields an empty plan with a
    ``no_stock_lengths`` warning rather than an error.
    """
    config = load_config_from_dict(request.config)
    output = command.execute_config(config, strict=request.strict)
    return _plan_output_to_schema(output)
