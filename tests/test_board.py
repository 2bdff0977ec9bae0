"""
Unit tests for board module.
"""
import itertools
import subprocess
import sys
from pathlib import Path

import numpy as np
import pytest

from tictactoe.core import (
    Player, GameStatus, Move,
    OutOfRangeError, AlreadyOccupiedError, InconsistentBoardError,
)
from tictactoe.board import Board, enumerate_lines, line_winner

ONE, TWO = Player.ONE, Player.TWO


def board_from_rows(rows):
    """Build a board from rows of "X", "O" and "." characters."""
    board = Board()
    glyphs = {"X": ONE, "O": TWO}
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch in glyphs:
                board.place(glyphs[ch], r, c)
    return board


def test_empty_board():
    """Test new board is empty and ongoing."""
    board = Board()

    assert board.dimensions() == (3, 3)
    assert (board.height, board.width) == (3, 3)
    assert board.render_rows() == [[None] * 3 for _ in range(3)]
    assert board.status() == GameStatus.ongoing()
    assert len(board.empty_cells()) == 9
    assert not board.is_full()


def test_place_sets_single_cell():
    board = Board()
    board.place(ONE, 0, 0)
    board.place(TWO, 2, 2)

    assert board.render_rows() == [
        [ONE, None, None],
        [None, None, None],
        [None, None, TWO],
    ]
    assert board.cell(2, 2) is TWO
    assert Move(0, 0) not in board.empty_cells()


@pytest.mark.parametrize("row,col", [(True, 0), (0, False), (1.0, 0), (0, "1"), (None, 0)])
def test_place_non_integer_coordinates(row, col):
    """Bools, floats and other non-integers are out of range, not indexes."""
    board = Board()

    with pytest.raises(OutOfRangeError):
        board.place(ONE, row, col)

    assert board.empty_cells() == Board().empty_cells()


def test_place_numpy_integer_coordinates():
    board = Board()
    board.place(TWO, np.int64(1), np.int8(2))
    assert board.cell(1, 2) is TWO


@pytest.mark.parametrize("row,col", [(0, 3), (3, 0), (3, 3), (10, 1), (-1, 0), (0, -1)])
def test_place_out_of_range(row, col):
    """Out-of-grid coordinates are rejected without changing the grid."""
    board = board_from_rows(["X..", ".O.", "..."])
    before = board.render_rows()

    with pytest.raises(OutOfRangeError) as exc_info:
        board.place(ONE, row, col)

    assert (exc_info.value.row, exc_info.value.col) == (row, col)
    assert board.render_rows() == before


def test_place_already_occupied():
    """Second placement on a cell keeps the original occupant."""
    board = Board()
    board.place(ONE, 0, 0)

    with pytest.raises(AlreadyOccupiedError) as exc_info:
        board.place(TWO, 0, 0)

    assert exc_info.value.occupant is ONE
    assert board.cell(0, 0) is ONE


def test_place_same_player_twice_is_not_idempotent():
    board = Board()
    board.place(ONE, 1, 1)
    with pytest.raises(AlreadyOccupiedError):
        board.place(ONE, 1, 1)


def test_every_occupied_cell_rejects_second_placement():
    board = board_from_rows(["XOX", "OXO", "OXO"])
    for r, c in itertools.product(range(3), range(3)):
        with pytest.raises(AlreadyOccupiedError):
            board.place(ONE, r, c)
    assert board.render_rows() == board_from_rows(["XOX", "OXO", "OXO"]).render_rows()


def test_cell_out_of_range():
    with pytest.raises(OutOfRangeError):
        Board().cell(3, 0)


def test_render_rows_is_a_copy():
    """Mutating rendered rows must not touch the board."""
    board = Board()
    rows = board.render_rows()
    rows[0][0] = ONE

    assert board.cell(0, 0) is None


def test_rows_and_columns():
    board = board_from_rows(["XXX", "OOO", "XX."])

    assert board.rows() == [
        [ONE, ONE, ONE],
        [TWO, TWO, TWO],
        [ONE, ONE, None],
    ]
    assert board.columns() == [
        [ONE, TWO, ONE],
        [ONE, TWO, ONE],
        [ONE, TWO, None],
    ]


def test_diagonals():
    """Diagonals run top-left to bottom-right and bottom-left to top-right."""
    board = board_from_rows(["X.O", ".X.", "O.X"])
    tl_br, bl_tr = board.diagonals()

    assert tl_br == [ONE, ONE, ONE]
    assert bl_tr == [TWO, ONE, TWO]

    board = board_from_rows(["..O", ".O.", "X.."])
    _, bl_tr = board.diagonals()
    assert bl_tr == [ONE, TWO, TWO]


def test_lines_scan_order():
    """Diagonals first, then rows top to bottom, then columns left to right."""
    names = [line.name for line in enumerate_lines(3, 3)]

    assert names == [
        "diag_tl_br", "diag_bl_tr",
        "row_0", "row_1", "row_2",
        "col_0", "col_1", "col_2",
    ]
    assert enumerate_lines(3, 3)[1].coords == [(2, 0), (1, 1), (0, 2)]


def test_lines_non_square_grid_has_no_diagonals():
    names = [line.name for line in enumerate_lines(2, 4)]
    assert len(names) == 6
    assert not any(name.startswith("diag") for name in names)


def test_line_winner():
    assert line_winner(np.array([1, 1, 1])) is ONE
    assert line_winner(np.array([2, 2, 2])) is TWO
    assert line_winner(np.array([1, 1, 0])) is None
    assert line_winner(np.array([1, 2, 1])) is None
    assert line_winner(np.array([], dtype=np.int8)) is None


def test_win_main_diagonal():
    """Player one on (0,0), (1,1), (2,2) wins."""
    board = Board()
    for i in range(3):
        board.place(ONE, i, i)

    assert board.status() == GameStatus.won(ONE)


def test_win_anti_diagonal():
    """Player two on (0,2), (1,1), (2,0) wins."""
    board = Board()
    board.place(TWO, 0, 2)
    board.place(TWO, 1, 1)
    board.place(TWO, 2, 0)

    assert board.status() == GameStatus.won(TWO)


@pytest.mark.parametrize("index", range(3))
@pytest.mark.parametrize("player", [ONE, TWO])
def test_win_rows_and_columns(index, player):
    """Every full row and column wins for its owner."""
    opponent = player.other()

    board = Board()
    for c in range(3):
        board.place(player, index, c)
    board.place(opponent, (index + 1) % 3, 0)
    assert board.status() == GameStatus.won(player)

    board = Board()
    for r in range(3):
        board.place(player, r, index)
    board.place(opponent, 0, (index + 1) % 3)
    assert board.status() == GameStatus.won(player)


def test_win_on_full_board():
    """A winning line beats a full grid."""
    board = board_from_rows(["XXX", "OOX", "XOO"])

    assert board.is_full()
    assert board.status() == GameStatus.won(ONE)


def test_single_player_with_two_lines_wins():
    """Last move completing a row and a column is still a single win."""
    board = board_from_rows(["XXX", "XOO", "XOO"])

    assert len(board.winning_lines()) == 2
    assert board.winner() is ONE


def test_draw():
    """Full board without a winning line is a draw."""
    board = board_from_rows(["OXO", "XXO", "OOX"])

    assert board.status() == GameStatus.draw()
    assert board.winner() is None
    assert board.empty_cells() == []


def test_mixed_lines_are_ongoing():
    board = board_from_rows(["XOX", "OXO", "O.."])
    assert board.status() == GameStatus.ongoing()


def test_two_winners_is_inconsistent():
    """Both players owning a line cannot come from alternating play."""
    board = board_from_rows(["XXX", "OOO", "..."])

    with pytest.raises(InconsistentBoardError):
        board.status()


def test_winning_lines_names():
    board = board_from_rows(["O..", "OX.", "O.X"])
    assert [(line.name, p) for line, p in board.winning_lines()] == [("col_0", TWO)]


def test_board_package_does_not_load_opencv():
    """The engine imports without the render extra."""
    code = "import sys, tictactoe.board, tictactoe.game; print('cv2' in sys.modules)"
    result = subprocess.run(
        [sys.executable, "-c", code],
        cwd=Path(__file__).resolve().parent.parent,
        capture_output=True,
        text=True,
        check=True,
    )
    assert result.stdout.strip() == "False"


if __name__ == "__main__":
    print("Running board module tests...")
    test_empty_board()
    test_place_sets_single_cell()
    test_place_already_occupied()
    print("✓ Placement tests passed")
    test_win_main_diagonal()
    test_win_anti_diagonal()
    test_draw()
    print("✓ Evaluation tests passed")
