"""Domain layer - measurements, cuts and boards."""

from .entities import Board, board_name
from .value_objects import (
    DEFAULT_BOARD_LENGTHS,
    DEFAULT_KERF,
    SIXTEENTH,
    Cut,
    Measurement,
    SplitPolicy,
    format_as_fraction,
    is_on_sixteenth_grid,
    parse_length,
    round_to_sixteenth,
)

__all__ = [
    "Board",
    "Cut",
    "DEFAULT_BOARD_LENGTHS",
    "DEFAULT_KERF",
    "Measurement",
    "SIXTEENTH",
    "SplitPolicy",
    "board_name",
    "format_as_fraction",
    "is_on_sixteenth_grid",
    "parse_length",
    "round_to_sixteenth",
]
