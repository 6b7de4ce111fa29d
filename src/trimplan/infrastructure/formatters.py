"""Output formatters and exporters for cutting plans."""

from __future__ import annotations

import json
from typing import Any

from trimplan.domain import Board, format_as_fraction
from trimplan.infrastructure.bin_packing import PackingWarning, PlanResult, PlanSummary


def _feet(length: float) -> str:
    return f"{length / 12:.1f} ft"


def _length_key(length: float) -> str:
    """Render a stock length as a compact mapping key (96.0 -> "96")."""
    return f"{length:g}"


class SummaryFormatter:
    """Formats plan totals."""

    def format(self, summary: PlanSummary, title: str = "SUMMARY") -> str:
        lines = [
            title,
            "=" * 40,
            f"{'Total boards:':<24} {summary.total_boards}",
            f"{'Total waste:':<24} {summary.total_waste:.1f}\"",
            f"{'Avg waste/board:':<24} {summary.average_waste:.1f}\"",
        ]
        return "\n".join(lines)


class ShoppingListFormatter:
    """Formats the boards to purchase, shortest length first."""

    def format(self, summary: PlanSummary) -> str:
        if not summary.board_counts:
            return "No boards to purchase."

        lines = [
            "SHOPPING LIST",
            "=" * 40,
            f"{'Length':<24} {'Qty':>6}",
            "-" * 40,
        ]
        for length, count in summary.shopping_list:
            label = f"{_length_key(length)}\" ({_feet(length)})"
            lines.append(f"{label:<24} {count:>6}")
        lines.append("-" * 40)
        lines.append(f"{'TOTAL':<24} {summary.total_boards:>6}")
        return "\n".join(lines)


class CutPlanFormatter:
    """Formats each board with its cuts in cutting order.

    Lengths are shown to the nearest 1/16" by default; pass
    ``fractions=False`` for decimal inches.
    """

    def __init__(self, fractions: bool = True) -> None:
        self._fractions = fractions

    def format(self, result: PlanResult) -> str:
        if not result.boards:
            return "No boards in cutting plan."

        lines = ["CUTTING PLAN", "=" * 70]
        for board in result.boards:
            lines.extend(self._format_board(board))
            lines.append("")
        return "\n".join(lines).rstrip()

    def _format_board(self, board: Board) -> list[str]:
        header = (
            f"Board {board.name or '?'} ({self._length(board.length)})"
            f"  waste: {self._length(board.waste)}"
        )
        lines = [header, "-" * 70]
        for offset, cut in zip(board.cut_offsets(), board.cuts):
            lines.append(
                f"  @ {self._length(offset):<12} {self._length(cut.size):<12} {cut.label}"
            )
        return lines

    def _length(self, value: float) -> str:
        if self._fractions:
            return format_as_fraction(value)
        return f"{value:.3f}\""


class JsonExporter:
    """Exports a cutting plan as JSON."""

    def to_dict(
        self,
        result: PlanResult,
        warnings: tuple[PackingWarning, ...] | list[PackingWarning] = (),
    ) -> dict[str, Any]:
        """Convert a plan to JSON-compatible data.

        Board count keys are strings since JSON objects only allow string keys.
        """
        return {
            "boards": [self._format_board(board) for board in result.boards],
            "summary": {
                "total_boards": result.summary.total_boards,
                "board_counts": {
                    _length_key(length): count
                    for length, count in result.summary.shopping_list
                },
                "total_waste": result.summary.total_waste,
            },
            "warnings": [
                {
                    "code": warning.code,
                    "message": warning.message,
                    "measurement_id": warning.measurement_id,
                }
                for warning in warnings
            ],
        }

    def export(
        self,
        result: PlanResult,
        warnings: tuple[PackingWarning, ...] | list[PackingWarning] = (),
    ) -> str:
        """Export a plan as a JSON string."""
        return json.dumps(self.to_dict(result, warnings), indent=2)

    def _format_board(self, board: Board) -> dict[str, Any]:
        return {
            "name": board.name,
            "length": board.length,
            "used": board.used_length,
            "waste": board.waste,
            "cuts": [
                {
                    "id": cut.id,
                    "size": cut.size,
                    "room": cut.room,
                    "wall": cut.wall,
                }
                for cut in board.cuts
            ],
        }
