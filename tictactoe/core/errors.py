"""
Exception taxonomy for the tic-tac-toe engine.

Placement and input errors are recoverable and local to a single attempt.
Turn-order, game-over and inconsistent-board errors signal a misbehaving
caller and are never swallowed.
"""
from typing import Optional

from .types import Player


class TicTacToeError(Exception):
    """Base class for all engine errors."""


class PlacementError(TicTacToeError, ValueError):
    """A move was rejected by the board. No cell was changed."""

    def __init__(self, message: str, row: int, col: int):
        super().__init__(message)
        self.row = row
        self.col = col


class OutOfRangeError(PlacementError):
    """Coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, height: int, width: int):
        super().__init__(
            f"Field ({row}, {col}) must be in range of the grid "
            f"({height}x{width})",
            row,
            col,
        )


class AlreadyOccupiedError(PlacementError):
    """Target cell already holds a player."""

    def __init__(self, row: int, col: int, occupant: Optional[Player] = None):
        super().__init__(
            f"Field ({row}, {col}) has already been chosen. "
            "Please choose another field.",
            row,
            col,
        )
        self.occupant = occupant


class InvalidInputError(TicTacToeError, ValueError):
    """Text entered at the console is not a usable coordinate."""


class TurnOrderError(TicTacToeError, RuntimeError):
    """Row/column submitted out of order."""


class GameOverError(TicTacToeError, RuntimeError):
    """A move was submitted after the game ended."""


class InconsistentBoardError(TicTacToeError, RuntimeError):
    """Both players own a winning line at the same time."""
