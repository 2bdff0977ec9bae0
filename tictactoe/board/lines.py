"""
Line geometry for win detection.

A line is a full row, column or diagonal of the grid. Lines are listed in
the fixed scan order used by Board.status():

    diag_tl_br, diag_bl_tr, row_0 .. row_{h-1}, col_0 .. col_{w-1}
"""
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple

import numpy as np

from tictactoe.core import Player


@dataclass(frozen=True)
class Line:
    """Cell coordinates of one row, column or diagonal."""
    name: str
    rows: Tuple[int, ...]
    cols: Tuple[int, ...]

    @property
    def coords(self) -> List[Tuple[int, int]]:
        """(row, col) pairs in line order."""
        return list(zip(self.rows, self.cols))

    def take(self, grid: np.ndarray) -> np.ndarray:
        """Extract this line's values from an encoded grid."""
        return grid[list(self.rows), list(self.cols)]


@lru_cache(maxsize=None)
def enumerate_lines(height: int, width: int) -> Tuple[Line, ...]:
    """
    Build every line of a grid in scan order.

    Diagonals only exist on square grids. The bottom-left to top-right
    diagonal starts at the bottom-left cell.

    Args:
        height: Number of rows
        width: Number of columns

    Returns:
        Tuple of lines (diagonals, then rows, then columns)
    """
    lines = []

    if height == width:
        idx = tuple(range(height))
        lines.append(Line("diag_tl_br", idx, idx))
        lines.append(Line("diag_bl_tr", tuple(reversed(idx)), idx))

    for r in range(height):
        lines.append(Line(f"row_{r}", (r,) * width, tuple(range(width))))

    for c in range(width):
        lines.append(Line(f"col_{c}", tuple(range(height)), (c,) * height))

    return tuple(lines)


def line_winner(values: np.ndarray) -> Optional[Player]:
    """
    Return the player occupying every cell of an encoded line, or None.

    Lines containing an empty cell or both players never win.
    """
    if values.size == 0:
        return None
    for player in (Player.ONE, Player.TWO):
        if np.all(values == player.value):
            return player
    return None
