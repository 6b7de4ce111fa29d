"""Value objects for baseboard cut planning.

All lengths are in inches. Trim is measured with a tape to the nearest
1/16", so helpers for snapping and formatting at that precision live here
alongside the immutable input and output records of a planning run.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

# Smallest increment on a standard tape measure
SIXTEENTH: float = 1 / 16

DEFAULT_KERF: float = 1 / 8

# 8', 10' and 12' boards
DEFAULT_BOARD_LENGTHS: tuple[float, ...] = (96.0, 120.0, 144.0)

_LENGTH_PATTERN = re.compile(
    r"""^\s*
    (?:(?P<whole>\d+(?:\.\d+)?)(?:\s+|\s*-\s*)?)?
    (?:(?P<num>\d+)\s*/\s*(?P<den>\d+))?
    \s*(?:"|in)?\s*$""",
    re.VERBOSE,
)


class SplitPolicy(str, Enum):
    """How an oversize measurement is divided across boards.

    Attributes:
        GREEDY: Cut full-length boards first, leaving one short remainder.
        BALANCED: Divide into near-equal pieces.
    """

    GREEDY = "greedy"
    BALANCED = "balanced"


def round_to_sixteenth(value: float) -> float:
    """Round a length to the nearest 1/16"."""
    return round(value / SIXTEENTH) * SIXTEENTH


def is_on_sixteenth_grid(value: float, tolerance: float = 1e-9) -> bool:
    """Check whether a length is a whole number of sixteenths."""
    return abs(value - round_to_sixteenth(value)) <= tolerance


def parse_length(value: float | int | str) -> float:
    """Parse a length given as a number or tape-measure string.

    Accepts plain numbers, decimal strings, and mixed fractions such as
    ``"83 5/16"``, ``"83-5/16\\""`` or ``"5/16"``.

    Args:
        value: Length as a number or string.

    Returns:
        Length in inches as a float.

    Raises:
        ValueError: If the string cannot be read as a length.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid length: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)

    match = _LENGTH_PATTERN.match(value)
    if match is None or not (match.group("whole") or match.group("num")):
        raise ValueError(f"Invalid length: {value!r}")

    length = float(match.group("whole") or 0)
    if match.group("num"):
        denominator = int(match.group("den"))
        if denominator == 0:
            raise ValueError(f"Invalid length: {value!r} (zero denominator)")
        length += int(match.group("num")) / denominator
    return length


def format_as_fraction(size: float) -> str:
    """Format a length as whole inches plus sixteenths.

    Examples:
        >>> format_as_fraction(83.3125)
        '83 5/16"'
        >>> format_as_fraction(5.0)
        '5"'
        >>> format_as_fraction(0.0625)
        '1/16"'
    """
    sixteenths = round(size / SIXTEENTH)
    whole, remainder = divmod(sixteenths, 16)
    if remainder == 0:
        return f'{whole}"'
    fraction = f"{remainder}/16"
    return f'{whole} {fraction}"' if whole > 0 else f'{fraction}"'


@dataclass(frozen=True)
class Measurement:
    """A wall run of baseboard to be produced.

    Attributes:
        id: Caller-assigned identifier, unique within a run.
        size: Required length in inches.
        room: Optional room label, for traceability only.
        wall: Optional wall label, for traceability only.
        split: Split preference, used only when the measurement is longer
            than every available stock length.
    """

    id: str
    size: float
    room: str | None = None
    wall: str | None = None
    split: SplitPolicy = SplitPolicy.GREEDY

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("Measurement size must be positive")

    @property
    def prefers_balanced_split(self) -> bool:
        """True if oversize splits should produce near-equal pieces."""
        return self.split == SplitPolicy.BALANCED

    def to_cut(self, size: float | None = None) -> Cut:
        """Create a cut of this measurement, or of a sub-length of it."""
        return Cut(
            id=self.id,
            size=self.size if size is None else size,
            room=self.room,
            wall=self.wall,
        )


@dataclass(frozen=True)
class Cut:
    """A length cut from a board for one measurement.

    Several cuts share an id when their measurement was split.
    """

    id: str
    size: float
    room: str | None = None
    wall: str | None = None

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("Cut size must be positive")

    @property
    def label(self) -> str:
        """Human-readable label: room and wall when known, else the id."""
        if self.room and self.wall:
            return f"{self.room} - {self.wall}"
        return self.room or self.wall or self.id
