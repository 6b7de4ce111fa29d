"""Application commands (use cases) for cutting plans."""

from __future__ import annotations

from typing import Callable, Sequence

from trimplan.application.config import (
    PlanConfiguration,
    config_to_measurements,
    config_to_packing_config,
)
from trimplan.domain import DEFAULT_KERF, Measurement
from trimplan.infrastructure.bin_packing import BaseboardOptimizer, BinPackingConfig

from .dtos import PlanOutput


class OptimizeCutPlanCommand:
    """Command to compute a cutting plan.

    Each call runs the optimizer from scratch; nothing is cached between
    calls.
    """

    def __init__(
        self,
        optimizer_factory: Callable[[BinPackingConfig], BaseboardOptimizer] | None = None,
    ) -> None:
        self.optimizer_factory = optimizer_factory or BaseboardOptimizer

    def execute(
        self,
        measurements: Sequence[Measurement],
        available_lengths: Sequence[float],
        kerf: float = DEFAULT_KERF,
        strict: bool = False,
        room: str | None = None,
    ) -> PlanOutput:
        """Plan cuts for domain measurements.

        Args:
            measurements: Pieces to produce, in input order.
            available_lengths: Purchasable stock lengths.
            kerf: Saw kerf in inches.
            strict: Raise instead of dropping an unplaceable piece.
            room: Room to focus the presented plan on.

        Returns:
            PlanOutput with the plan and any warnings.
        """
        optimizer = self.optimizer_factory(BinPackingConfig(kerf=kerf, strict=strict))
        outcome = optimizer.optimize(measurements, available_lengths)
        return PlanOutput(
            result=outcome.result,
            warnings=list(outcome.warnings),
            room=room,
        )

    def execute_config(
        self,
        config: PlanConfiguration,
        strict: bool = False,
    ) -> PlanOutput:
        """Plan cuts for a loaded configuration."""
        packing_config = config_to_packing_config(config)
        return self.execute(
            config_to_measurements(config),
            config.available_lengths,
            kerf=packing_config.kerf,
            strict=strict or packing_config.strict,
            room=config.output.room,
        )
