"""Bin packing data models and algorithms for linear trim optimization.

This module turns a list of wall measurements into a purchase and cutting
plan for stock boards. Each candidate set of stock lengths is packed with a
best-fit decreasing heuristic, the lowest-waste packing is kept, oversize
measurements that prefer it are re-split into near-equal pieces, and every
board is finally shrunk to the shortest stock length that still holds its
cuts.

Result dataclasses are frozen; boards stay mutable only while a plan is
being built.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterable, Sequence

from trimplan.domain import (
    DEFAULT_KERF,
    Board,
    Cut,
    Measurement,
    board_name,
    round_to_sixteenth,
)

logger = logging.getLogger(__name__)

# Pairs of stock lengths are only tried up to this many distinct lengths
MAX_LENGTHS_FOR_PAIRS = 4

NO_STOCK_LENGTHS = "no_stock_lengths"
UNPLACEABLE_PIECE = "unplaceable_piece"


class UnplaceablePieceError(ValueError):
    """Raised in strict mode when a piece fits no available stock length."""

    def __init__(self, measurement_id: str, size: float) -> None:
        self.measurement_id = measurement_id
        self.size = size
        super().__init__(
            f"Piece of {size}\" for measurement '{measurement_id}' "
            f"does not fit any available board length"
        )


@dataclass(frozen=True)
class BinPackingConfig:
    """Configuration for trim optimization.

    Attributes:
        kerf: Saw blade kerf width in inches (default 1/8").
        max_lengths_for_pairs: Largest number of distinct stock lengths for
            which every pair of lengths is tried as a strategy.
        strict: Raise UnplaceablePieceError instead of dropping a piece that
            fits no stock length.
    """

    kerf: float = DEFAULT_KERF
    max_lengths_for_pairs: int = MAX_LENGTHS_FOR_PAIRS
    strict: bool = False

    def __post_init__(self) -> None:
        if self.kerf < 0:
            raise ValueError("Kerf must be non-negative")
        if self.max_lengths_for_pairs < 0:
            raise ValueError("Pair limit must be non-negative")


@dataclass(frozen=True)
class PlanSummary:
    """Totals for a cutting plan.

    Attributes:
        total_boards: Number of boards to purchase.
        board_counts: Boards to purchase keyed by stock length.
        total_waste: Leftover length across all boards in inches.
    """

    total_boards: int
    board_counts: dict[float, int]
    total_waste: float

    @classmethod
    def empty(cls) -> PlanSummary:
        return cls(total_boards=0, board_counts={}, total_waste=0.0)

    @classmethod
    def from_boards(cls, boards: Sequence[Board]) -> PlanSummary:
        """Aggregate board count, per-length counts and waste."""
        counts: dict[float, int] = {}
        for board in boards:
            counts[board.length] = counts.get(board.length, 0) + 1
        return cls(
            total_boards=len(boards),
            board_counts=counts,
            total_waste=sum((board.waste for board in boards), 0.0),
        )

    @property
    def average_waste(self) -> float:
        """Average leftover length per board."""
        if self.total_boards == 0:
            return 0.0
        return self.total_waste / self.total_boards

    @property
    def shopping_list(self) -> list[tuple[float, int]]:
        """(length, count) pairs sorted by length, shortest first."""
        return sorted(self.board_counts.items())


@dataclass(frozen=True)
class PlanResult:
    """Complete cutting plan.

    Attributes:
        boards: Boards in purchase order; order determines board names.
        summary: Totals derived from the boards.
    """

    boards: tuple[Board, ...]
    summary: PlanSummary

    @classmethod
    def empty(cls) -> PlanResult:
        return cls(boards=(), summary=PlanSummary.empty())

    @classmethod
    def from_boards(cls, boards: Sequence[Board]) -> PlanResult:
        return cls(boards=tuple(boards), summary=PlanSummary.from_boards(boards))

    @property
    def cuts(self) -> list[Cut]:
        """Every cut in board order."""
        return [cut for board in self.boards for cut in board.cuts]

    def cuts_for(self, measurement_id: str) -> list[Cut]:
        """All cuts produced for one measurement."""
        return [cut for cut in self.cuts if cut.id == measurement_id]

    def for_room(self, room: str) -> PlanResult:
        """Plan restricted to boards holding at least one cut from ``room``.

        Boards keep the names they were given in the full plan.
        """
        return PlanResult.from_boards(
            [board for board in self.boards if board.has_room(room)]
        )


@dataclass(frozen=True)
class PackingWarning:
    """A recoverable problem found while building a plan."""

    code: str
    message: str
    measurement_id: str | None = None


@dataclass(frozen=True)
class PackingOutcome:
    """A plan plus any warnings raised while computing it.

    Warnings are kept apart from the plan so that an empty plan caused by
    bad input can be told apart from a legitimately empty one.
    """

    result: PlanResult
    warnings: tuple[PackingWarning, ...] = ()

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


@dataclass
class PackingAttempt:
    """Boards produced by packing with one candidate set of stock lengths.

    Attributes:
        lengths: Stock lengths the packer was allowed to use.
        boards: Boards in creation order.
        dropped: Cuts that fit none of the allowed lengths.
    """

    lengths: tuple[float, ...]
    boards: list[Board] = field(default_factory=list)
    dropped: list[Cut] = field(default_factory=list)

    @property
    def total_waste(self) -> float:
        return calculate_total_waste(self.boards)

    @property
    def board_count(self) -> int:
        return len(self.boards)

    @property
    def is_complete(self) -> bool:
        return not self.dropped


def calculate_total_waste(boards: Iterable[Board]) -> float:
    """Sum of leftover length across boards."""
    return sum((board.waste for board in boards), 0.0)


def distinct_lengths(lengths: Iterable[float]) -> tuple[float, ...]:
    """Unique stock lengths sorted shortest first."""
    return tuple(sorted({float(length) for length in lengths}))


def enumerate_strategies(
    lengths: Iterable[float],
    max_lengths_for_pairs: int = MAX_LENGTHS_FOR_PAIRS,
) -> list[tuple[float, ...]]:
    """Build the candidate sets of stock lengths to pack with.

    Order is significant because earlier candidates win ties: each single
    length, then all lengths together, then every pair of lengths when there
    are at most ``max_lengths_for_pairs`` distinct lengths.

    Args:
        lengths: Available stock lengths (duplicates are ignored).
        max_lengths_for_pairs: Distinct-length limit for trying pairs.

    Returns:
        Candidate length sets, each sorted shortest first.
    """
    distinct = distinct_lengths(lengths)
    if not distinct:
        return []

    candidates: list[tuple[float, ...]] = [(length,) for length in distinct]
    candidates.append(distinct)
    if len(distinct) <= max_lengths_for_pairs:
        candidates.extend(combinations(distinct, 2))
    return candidates


def sort_for_packing(measurements: Sequence[Measurement]) -> list[Measurement]:
    """Sort measurements longest first, keeping input order for equal sizes."""
    return sorted(measurements, key=lambda m: m.size, reverse=True)


class BestFitDecreasingPacker:
    """Best-fit decreasing packer for one-dimensional stock.

    Measurements are placed longest first. Each goes onto the existing board
    it leaves with the least free length; a new board is opened only when no
    board has room, using the stock length that wastes least. Measurements
    longer than the longest allowed length are split greedily into
    full-length pieces plus one remainder.

    Attributes:
        kerf: Saw kerf width in inches.
    """

    def __init__(self, kerf: float = DEFAULT_KERF) -> None:
        self.kerf = kerf

    def pack(
        self,
        measurements: Sequence[Measurement],
        lengths: Sequence[float],
    ) -> PackingAttempt:
        """Pack all measurements using only the given stock lengths.

        Args:
            measurements: Measurements to place.
            lengths: Stock lengths allowed for this attempt.

        Returns:
            PackingAttempt with boards in creation order.

        Raises:
            ValueError: If no lengths are given.
        """
        allowed = distinct_lengths(lengths)
        if not allowed:
            raise ValueError("At least one board length is required")

        attempt = PackingAttempt(lengths=allowed)
        longest = allowed[-1]

        for measurement in sort_for_packing(measurements):
            if measurement.size > longest:
                self._place_oversized(measurement, attempt)
                continue

            cut = measurement.to_cut()
            if self.place(cut, attempt.boards, allowed) is None:
                attempt.dropped.append(cut)

        return attempt

    def place(
        self,
        cut: Cut,
        boards: list[Board],
        lengths: Sequence[float],
    ) -> Board | None:
        """Place a cut on the best existing board or on a new one.

        Args:
            cut: Cut to place.
            boards: Boards built so far; a new board is appended if needed.
            lengths: Stock lengths available for a new board, shortest first.

        Returns:
            The board that received the cut, or None if nothing can hold it.
        """
        board = self.find_best_board(boards, cut.size)
        if board is not None:
            board.add_cut(cut)
            return board

        return self.open_board(cut, boards, lengths)

    def open_board(
        self,
        cut: Cut,
        boards: list[Board],
        lengths: Sequence[float],
    ) -> Board | None:
        """Start a new board holding only ``cut``."""
        length = self.best_new_length(cut.size, lengths)
        if length is None:
            return None
        board = Board(length=length, kerf=self.kerf, cuts=[cut])
        boards.append(board)
        return board

    def find_best_board(self, boards: Sequence[Board], size: float) -> Board | None:
        """Board with the least free length left after adding ``size``.

        Ties go to the earliest board.
        """
        best: Board | None = None
        best_remaining = math.inf

        for board in boards:
            if not board.can_fit(size):
                continue
            remaining = board.remaining_after(size)
            if remaining < best_remaining:
                best = board
                best_remaining = remaining

        return best

    @staticmethod
    def best_new_length(size: float, lengths: Sequence[float]) -> float | None:
        """Stock length that holds ``size`` with the least waste."""
        best: float | None = None
        min_waste = math.inf

        for length in lengths:
            if size <= length and length - size < min_waste:
                min_waste = length - size
                best = length

        return best

    def _place_oversized(self, measurement: Measurement, attempt: PackingAttempt) -> None:
        """Split a measurement longer than any allowed length across boards.

        Full-length pieces get one board each; the remainder goes on its own
        board of whichever length wastes least.
        """
        longest = attempt.lengths[-1]
        remaining = measurement.size

        while remaining > longest:
            attempt.boards.append(
                Board(length=longest, kerf=self.kerf, cuts=[measurement.to_cut(longest)])
            )
            remaining -= longest

        remainder = measurement.to_cut(remaining)
        if self.open_board(remainder, attempt.boards, attempt.lengths) is None:
            attempt.dropped.append(remainder)


def select_best_attempt(attempts: Iterable[PackingAttempt]) -> PackingAttempt | None:
    """Pick the attempt with the least waste.

    Ties on waste go to the attempt with fewer boards, then to the earlier
    attempt. Attempts that dropped a piece rank after all complete ones.
    """
    best: PackingAttempt | None = None
    for attempt in attempts:
        if best is None or _is_better(attempt, best):
            best = attempt
    return best


def _is_better(candidate: PackingAttempt, incumbent: PackingAttempt) -> bool:
    if candidate.is_complete != incumbent.is_complete:
        return candidate.is_complete
    candidate_waste = candidate.total_waste
    incumbent_waste = incumbent.total_waste
    if candidate_waste != incumbent_waste:
        return candidate_waste < incumbent_waste
    return candidate.board_count < incumbent.board_count


def balanced_pieces(size: float, max_length: float) -> list[float]:
    """Divide an oversize length into near-equal pieces.

    Uses the fewest pieces that can each fit ``max_length``. Every piece is
    the even share rounded to 1/16" except the last, which takes whatever
    rounding left over so the pieces sum to ``size``.

    Args:
        size: Length to divide.
        max_length: Longest available stock length.

    Returns:
        Piece lengths in cutting order.
    """
    count = math.ceil(size / max_length)
    base = round_to_sixteenth(size / count)
    pieces = [base] * count
    pieces[-1] = size - base * (count - 1)
    return pieces


class BalancedSplitter:
    """Re-splits oversize measurements that prefer near-equal pieces.

    Works on a finished board list: the greedy pieces of each such
    measurement are removed, boards left empty are discarded, and the
    balanced pieces are placed back with the packer's best-fit search.
    Measurements are handled in input order, each seeing the changes made
    for the previous one.

    Attributes:
        packer: Packer whose best-fit search places the new pieces.
    """

    def __init__(self, packer: BestFitDecreasingPacker) -> None:
        self.packer = packer

    def apply(
        self,
        boards: list[Board],
        measurements: Sequence[Measurement],
        lengths: Sequence[float],
    ) -> list[Cut]:
        """Rework ``boards`` in place.

        Args:
            boards: Boards of the chosen plan, modified in place.
            measurements: Measurements in input order.
            lengths: All available stock lengths.

        Returns:
            Pieces that could not be placed on any board.
        """
        allowed = distinct_lengths(lengths)
        longest = allowed[-1]
        dropped: list[Cut] = []

        for measurement in measurements:
            if not measurement.prefers_balanced_split or measurement.size <= longest:
                continue

            for board in boards:
                board.remove_cuts(measurement.id)
            boards[:] = [board for board in boards if not board.is_empty]

            pieces = balanced_pieces(measurement.size, longest)
            logger.info(
                "Balanced split of '%s' (%s\") into %d pieces",
                measurement.id,
                measurement.size,
                len(pieces),
            )

            for piece in pieces:
                cut = measurement.to_cut(piece)
                if self.packer.place(cut, boards, allowed) is None:
                    dropped.append(cut)

        return dropped


def downgrade_boards(boards: Iterable[Board], lengths: Iterable[float]) -> int:
    """Shrink each board to the shortest stock length that holds its cuts.

    Only ever reduces a board's length; cuts are never moved.

    Returns:
        Number of boards whose length changed.
    """
    allowed = distinct_lengths(lengths)
    downgraded = 0

    for board in boards:
        used = board.used_length
        for length in allowed:
            if used <= length < board.length:
                logger.debug(
                    "Downgrading %s\" board to %s\" (uses %s\")",
                    board.length,
                    length,
                    used,
                )
                board.length = length
                downgraded += 1
                break

    return downgraded


class BaseboardOptimizer:
    """Builds the lowest-waste cutting plan for a set of measurements.

    Runs the whole pipeline: strategy enumeration, one packing per strategy,
    selection, balanced re-splitting, downgrading and summary. Holds no state
    between calls.

    Attributes:
        config: Optimization configuration.
        packer: Best-fit decreasing packer.
        splitter: Balanced-split post-processor.
    """

    def __init__(self, config: BinPackingConfig | None = None) -> None:
        self.config = config or BinPackingConfig()
        self.packer = BestFitDecreasingPacker(self.config.kerf)
        self.splitter = BalancedSplitter(self.packer)

    def optimize(
        self,
        measurements: Sequence[Measurement],
        available_lengths: Sequence[float],
    ) -> PackingOutcome:
        """Compute the cutting plan.

        Args:
            measurements: Pieces to produce, in input order.
            available_lengths: Purchasable stock lengths.

        Returns:
            PackingOutcome holding the plan and any warnings. With no stock
            lengths the plan is empty and a ``no_stock_lengths`` warning is
            included.

        Raises:
            ValueError: If a stock length is not positive.
            UnplaceablePieceError: In strict mode, if a piece fits no stock
                length.
        """
        lengths = distinct_lengths(available_lengths)
        if not lengths:
            logger.warning("No available board lengths provided")
            return PackingOutcome(
                result=PlanResult.empty(),
                warnings=(
                    PackingWarning(
                        code=NO_STOCK_LENGTHS,
                        message="No available board lengths provided",
                    ),
                ),
            )
        if lengths[0] <= 0:
            raise ValueError("Board lengths must be positive")

        logger.debug(
            "Optimizing %d measurements with board lengths %s",
            len(measurements),
            lengths,
        )

        attempts = [
            self.packer.pack(measurements, candidate)
            for candidate in enumerate_strategies(
                lengths, self.config.max_lengths_for_pairs
            )
        ]
        for attempt in attempts:
            logger.debug(
                "Strategy %s: %d boards, %.4f\" waste",
                attempt.lengths,
                attempt.board_count,
                attempt.total_waste,
            )

        best = select_best_attempt(attempts)
        assert best is not None
        logger.info(
            "Selected strategy %s: %d boards, %.4f\" waste",
            best.lengths,
            best.board_count,
            best.total_waste,
        )

        boards = best.boards
        dropped = list(best.dropped)
        dropped.extend(self.splitter.apply(boards, measurements, lengths))
        downgrade_boards(boards, lengths)

        for index, board in enumerate(boards):
            board.name = board_name(index)

        warnings = tuple(self._report_dropped(cut) for cut in dropped)
        return PackingOutcome(result=PlanResult.from_boards(boards), warnings=warnings)

    def _report_dropped(self, cut: Cut) -> PackingWarning:
        if self.config.strict:
            raise UnplaceablePieceError(cut.id, cut.size)
        logger.error(
            "Dropping %s\" piece of '%s': no board length can hold it",
            cut.size,
            cut.id,
        )
        return PackingWarning(
            code=UNPLACEABLE_PIECE,
            message=f"{cut.size}\" piece of '{cut.id}' does not fit any board length",
            measurement_id=cut.id,
        )


def optimize_baseboards(
    measurements: Sequence[Measurement],
    available_lengths: Sequence[float],
    kerf: float = DEFAULT_KERF,
) -> PackingOutcome:
    """Compute a cutting plan with default settings and the given kerf."""
    return BaseboardOptimizer(BinPackingConfig(kerf=kerf)).optimize(
        measurements, available_lengths
    )
