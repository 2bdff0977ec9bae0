"""
Console rendering of the board.

Row and column labels are 1-indexed, matching what players type in.
"""
from typing import List, Optional, Sequence

from tictactoe.core import Player, GameStatus, Outcome

# Left gutter holding the "row N" labels
_GUTTER = " " * 6


def render_line(cells: Sequence[Optional[Player]]) -> str:
    """Render one row, e.g. " X |   | O "."""
    return "|".join(f" {cell} " if cell is not None else "   " for cell in cells)


def render_board(rows: Sequence[Sequence[Optional[Player]]]) -> List[str]:
    """
    Render the output of Board.render_rows() as text lines.

    Args:
        rows: Grid rows (None = empty cell)

    Returns:
        Lines without trailing newlines
    """
    width = len(rows[0]) if rows else 0
    separator = _GUTTER + "+".join("---" for _ in range(width))

    lines = [
        _GUTTER + " ".join("col" for _ in range(width)),
        _GUTTER + " " + "   ".join(str(c + 1) for c in range(width)),
    ]
    for idx, row in enumerate(rows):
        lines.append(f"row {idx + 1} {render_line(row)}")
        if idx < len(rows) - 1:
            lines.append(separator)
    return lines


def format_status(status: GameStatus) -> str:
    """User-facing message for a game status."""
    if status.outcome is Outcome.WON:
        return f"Player {status.winner} wins!"
    if status.outcome is Outcome.DRAW:
        return "It's a draw!"
    return "Game in progress"
