"""Domain entities for baseboard cut planning."""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import Cut


def board_name(index: int) -> str:
    """Display name for the board at a zero-based position in a plan.

    Names run A..Z, AA..AZ, BA.. (bijective base 26, no zero digit).

    Args:
        index: Zero-based board position.

    Returns:
        Letter code for the board.

    Raises:
        ValueError: If index is negative.
    """
    if index < 0:
        raise ValueError("Board index must be non-negative")

    letters: list[str] = []
    number = index + 1
    while number > 0:
        number, remainder = divmod(number - 1, 26)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


@dataclass
class Board:
    """A purchased stock board and the cuts assigned to it.

    Boards are mutable while a plan is being built: cuts are appended during
    packing and the length may later be reduced to a shorter stock size.

    Attributes:
        length: Chosen stock length in inches.
        kerf: Saw kerf consumed between adjacent cuts on this board.
        cuts: Cuts in the order they will be made.
        name: Display name, assigned once the plan is final.
    """

    length: float
    kerf: float = 0.0
    cuts: list[Cut] = field(default_factory=list)
    name: str | None = None

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Board length must be positive")
        if self.kerf < 0:
            raise ValueError("Kerf must be non-negative")

    @property
    def used_length(self) -> float:
        """Length consumed by cuts plus the kerf between them."""
        if not self.cuts:
            return 0.0
        return sum(cut.size for cut in self.cuts) + (len(self.cuts) - 1) * self.kerf

    @property
    def waste(self) -> float:
        """Length left over after all cuts."""
        return self.length - self.used_length

    @property
    def is_empty(self) -> bool:
        return not self.cuts

    def space_needed(self, size: float) -> float:
        """Length a new cut of ``size`` would consume, including its kerf."""
        return size + (self.kerf if self.cuts else 0.0)

    def can_fit(self, size: float) -> bool:
        """Check if a cut of ``size`` still fits on this board."""
        return self.used_length + self.space_needed(size) <= self.length

    def remaining_after(self, size: float) -> float:
        """Free length left if a cut of ``size`` were added."""
        return self.length - (self.used_length + self.space_needed(size))

    def add_cut(self, cut: Cut) -> None:
        self.cuts.append(cut)

    def remove_cuts(self, measurement_id: str) -> int:
        """Remove every cut belonging to a measurement.

        Returns:
            Number of cuts removed.
        """
        kept = [cut for cut in self.cuts if cut.id != measurement_id]
        removed = len(self.cuts) - len(kept)
        self.cuts = kept
        return removed

    def has_room(self, room: str) -> bool:
        """True if any cut on this board belongs to ``room``."""
        return any(cut.room == room for cut in self.cuts)

    def cut_offsets(self) -> list[float]:
        """Start position of each cut measured from the board's end."""
        offsets: list[float] = []
        position = 0.0
        for cut in self.cuts:
            offsets.append(position)
            position += cut.size + self.kerf
        return offsets
