"""Infrastructure layer - packing engine and output formatting."""

from .bin_packing import (
    NO_STOCK_LENGTHS,
    UNPLACEABLE_PIECE,
    BalancedSplitter,
    BaseboardOptimizer,
    BestFitDecreasingPacker,
    BinPackingConfig,
    PackingAttempt,
    PackingOutcome,
    PackingWarning,
    PlanResult,
    PlanSummary,
    UnplaceablePieceError,
    balanced_pieces,
    calculate_total_waste,
    downgrade_boards,
    enumerate_strategies,
    optimize_baseboards,
    select_best_attempt,
)
from .formatters import (
    CutPlanFormatter,
    JsonExporter,
    ShoppingListFormatter,
    SummaryFormatter,
)

__all__ = [
    "BalancedSplitter",
    "BaseboardOptimizer",
    "BestFitDecreasingPacker",
    "BinPackingConfig",
    "CutPlanFormatter",
    "JsonExporter",
    "NO_STOCK_LENGTHS",
    "PackingAttempt",
    "PackingOutcome",
    "PackingWarning",
    "PlanResult",
    "PlanSummary",
    "ShoppingListFormatter",
    "SummaryFormatter",
    "UNPLACEABLE_PIECE",
    "UnplaceablePieceError",
    "balanced_pieces",
    "calculate_total_waste",
    "downgrade_boards",
    "enumerate_strategies",
    "optimize_baseboards",
    "select_best_attempt",
]
