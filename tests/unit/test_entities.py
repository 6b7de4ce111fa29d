"""Unit tests for the Board entity and board naming."""

import pytest

from trimplan.domain import Board, Cut, board_name


class TestBoardName:
    """Tests for board_name."""

    @pytest.mark.parametrize(
        "index,expected",
        [
            (0, "A"),
            (1, "B"),
            (25, "Z"),
            (26, "AA"),
            (27, "AB"),
            (51, "AZ"),
            (52, "BA"),
            (701, "ZZ"),
            (702, "AAA"),
        ],
    )
    def test_bijective_letters(self, index: int, expected: str) -> None:
        """Names run A..Z then AA, AB, ... with no zero digit."""
        assert board_name(index) == expected

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            board_name(-1)


class TestBoard:
    """Tests for Board bookkeeping."""

    @pytest.fixture
    def board(self) -> Board:
        return Board(length=96.0, kerf=0.125)

    def test_validation(self) -> None:
        """Length must be positive and kerf non-negative."""
        with pytest.raises(ValueError, match="Board length must be positive"):
            Board(length=0.0)
        with pytest.raises(ValueError, match="Kerf must be non-negative"):
            Board(length=96.0, kerf=-0.1)

    def test_empty_board(self, board: Board) -> None:
        """An empty board uses nothing and wastes its whole length."""
        assert board.is_empty
        assert board.used_length == 0.0
        assert board.waste == 96.0

    def test_kerf_only_between_cuts(self, board: Board) -> None:
        """N cuts consume (N - 1) kerfs."""
        board.add_cut(Cut("A", 40.0))
        assert board.used_length == 40.0

        board.add_cut(Cut("B", 30.0))
        assert board.used_length == 70.125
        assert board.waste == pytest.approx(25.875)

    def test_space_needed_and_can_fit(self, board: Board) -> None:
        """The first cut needs no kerf, later cuts need one kerf each."""
        assert board.space_needed(50.0) == 50.0
        assert board.can_fit(96.0)
        assert not board.can_fit(96.0625)

        board.add_cut(Cut("A", 48.0))
        assert board.space_needed(10.0) == 10.125
        assert board.can_fit(47.875)
        assert not board.can_fit(47.9375)
        assert board.remaining_after(40.0) == pytest.approx(7.875)

    def test_remove_cuts(self, board: Board) -> None:
        """All cuts of a measurement are removed and counted."""
        board.add_cut(Cut("A", 20.0))
        board.add_cut(Cut("B", 20.0))
        board.add_cut(Cut("A", 20.0))

        assert board.remove_cuts("A") == 2
        assert [cut.id for cut in board.cuts] == ["B"]
        assert board.remove_cuts("missing") == 0

    def test_has_room(self, board: Board) -> None:
        board.add_cut(Cut("A", 20.0, room="Kitchen"))

        assert board.has_room("Kitchen")
        assert not board.has_room("Hallway")

    def test_cut_offsets(self, board: Board) -> None:
        """Each cut starts after the previous cut and one kerf."""
        board.add_cut(Cut("A", 40.0))
        board.add_cut(Cut("B", 30.0))
        board.add_cut(Cut("C", 10.0))

        assert board.cut_offsets() == [0.0, 40.125, 70.25]
