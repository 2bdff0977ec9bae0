"""
Board model and game-state evaluation.
"""
from typing import List, Optional, Tuple
import logging
import operator

import numpy as np

from tictactoe.core import (
    BOARD_SIZE,
    Player,
    GameStatus,
    Move,
    OutOfRangeError,
    AlreadyOccupiedError,
    InconsistentBoardError,
)
from .lines import Line, enumerate_lines, line_winner

logger = logging.getLogger(__name__)

# Grid encoding of an empty cell; players use Player.value
EMPTY = 0

Cell = Optional[Player]


def _decode(value) -> Cell:
    return None if value == EMPTY else Player(int(value))


class Board:
    """
    Fixed 3x3 grid of cells.

    Cells are only changed through place(), and each cell is set at most
    once. Everything else is a read-only view built fresh on every call.
    """

    def __init__(self):
        self._grid = np.full((BOARD_SIZE, BOARD_SIZE), EMPTY, dtype=np.int8)

    def dimensions(self) -> Tuple[int, int]:
        """(height, width) of the grid."""
        height, width = self._grid.shape
        return int(height), int(width)

    @property
    def height(self) -> int:
        return self.dimensions()[0]

    @property
    def width(self) -> int:
        return self.dimensions()[1]

    def in_range(self, row: int, col: int) -> bool:
        """
        Check whether (row, col) lies on the grid.

        Only integers count as coordinates; bools and floats never do.
        """
        if isinstance(row, bool) or isinstance(col, bool):
            return False
        try:
            row, col = operator.index(row), operator.index(col)
        except TypeError:
            return False
        height, width = self.dimensions()
        return 0 <= row < height and 0 <= col < width

    def place(self, player: Player, row: int, col: int) -> None:
        """
        Occupy a cell.

        Args:
            player: Player taking the cell
            row: Zero-indexed row
            col: Zero-indexed column

        Raises:
            OutOfRangeError: If row or col is outside the grid
            AlreadyOccupiedError: If the cell already holds a player
        """
        if not self.in_range(row, col):
            height, width = self.dimensions()
            raise OutOfRangeError(row, col, height, width)

        current = self._grid[row, col]
        if current != EMPTY:
            raise AlreadyOccupiedError(row, col, _decode(current))

        self._grid[row, col] = player.value
        logger.debug(f"Player {player} placed at ({row}, {col})")

    def cell(self, row: int, col: int) -> Cell:
        """
        Get the occupant of a cell.

        Raises:
            OutOfRangeError: If row or col is outside the grid
        """
        if not self.in_range(row, col):
            height, width = self.dimensions()
            raise OutOfRangeError(row, col, height, width)
        return _decode(self._grid[row, col])

    def render_rows(self) -> List[List[Cell]]:
        """Copy of the grid for display, row-major."""
        return [[_decode(v) for v in row] for row in self._grid]

    def rows(self) -> List[List[Cell]]:
        """Rows top to bottom."""
        return self.render_rows()

    def columns(self) -> List[List[Cell]]:
        """Columns left to right, each listed top to bottom."""
        return [[_decode(v) for v in col] for col in self._grid.T]

    def diagonals(self) -> Tuple[List[Cell], List[Cell]]:
        """
        (top-left to bottom-right, bottom-left to top-right) diagonals.
        """
        tl_br = np.diag(self._grid)
        bl_tr = np.diag(np.flipud(self._grid))
        return [_decode(v) for v in tl_br], [_decode(v) for v in bl_tr]

    def lines(self) -> Tuple[Line, ...]:
        """All lines in scan order."""
        return enumerate_lines(*self.dimensions())

    def empty_cells(self) -> List[Move]:
        """Unoccupied cells in row-major order."""
        return [Move(int(r), int(c)) for r, c in np.argwhere(self._grid == EMPTY)]

    def is_full(self) -> bool:
        return not np.any(self._grid == EMPTY)

    def winning_lines(self) -> List[Tuple[Line, Player]]:
        """Every line fully occupied by one player, in scan order."""
        found = []
        for line in self.lines():
            player = line_winner(line.take(self._grid))
            if player is not None:
                found.append((line, player))
        return found

    def winner(self) -> Optional[Player]:
        """
        First winning player in scan order, or None.

        Raises:
            InconsistentBoardError: If both players own a winning line
        """
        winners = self.winning_lines()
        if not winners:
            return None

        first_line, first_player = winners[0]
        for line, player in winners[1:]:
            if player is not first_player:
                raise InconsistentBoardError(
                    f"Both players have a winning line "
                    f"({first_line.name} for {first_player}, "
                    f"{line.name} for {player})"
                )
        return first_player

    def status(self) -> GameStatus:
        """
        Evaluate the board.

        Returns:
            Won(player) if some line is fully owned by one player,
            Draw if the grid is full otherwise, else Ongoing

        Raises:
            InconsistentBoardError: If both players own a winning line
        """
        player = self.winner()
        if player is not None:
            return GameStatus.won(player)
        if self.is_full():
            return GameStatus.draw()
        return GameStatus.ongoing()

    def __repr__(self) -> str:
        rows = ["".join(c.glyph if c else "." for c in row) for row in self.render_rows()]
        return f"Board({'/'.join(rows)})"
