"""
Core data types for the tic-tac-toe engine.
Defines contracts between modules to ensure stable interfaces.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Grid is always square with this many rows and columns
BOARD_SIZE = 3


class Player(Enum):
    """The two player identities, valued by their grid encoding."""
    ONE = 1
    TWO = 2

    @property
    def glyph(self) -> str:
        """Display mark of the player."""
        return "X" if self is Player.ONE else "O"

    def other(self) -> "Player":
        """Return the opponent."""
        return Player.TWO if self is Player.ONE else Player.ONE

    @classmethod
    def from_name(cls, name: str) -> "Player":
        """
        Parse a player from configuration text.

        Accepts "one"/"two", "x"/"o" and "1"/"2" (case-insensitive).

        Raises:
            ValueError: If the text names no player
        """
        key = str(name).strip().lower()
        if key in ("one", "x", "1"):
            return cls.ONE
        if key in ("two", "o", "2"):
            return cls.TWO
        raise ValueError(f"Unknown player: {name!r}")

    def __str__(self) -> str:
        return self.glyph


class Outcome(Enum):
    """Outcome of a game at a given moment."""
    ONGOING = "ongoing"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    Status of a game, derived from board contents.

    Never stored by the board; compute it with Board.status().
    """
    outcome: Outcome
    winner: Optional[Player] = None

    def __post_init__(self):
        if (self.outcome is Outcome.WON) != (self.winner is not None):
            raise ValueError("A winner is set exactly when the outcome is WON")

    @classmethod
    def ongoing(cls) -> "GameStatus":
        return cls(Outcome.ONGOING)

    @classmethod
    def won(cls, player: Player) -> "GameStatus":
        return cls(Outcome.WON, player)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(Outcome.DRAW)

    @property
    def is_terminal(self) -> bool:
        """True once the game is won or drawn."""
        return self.outcome is not Outcome.ONGOING


@dataclass(frozen=True)
class Move:
    """
    A zero-indexed (row, col) coordinate pair.
    """
    row: int
    col: int


class TurnPhase(Enum):
    """Input phase of a single turn."""
    AWAITING_ROW = "awaiting_row"  # Nothing entered yet
    AWAITING_COL = "awaiting_col"  # Row entered, waiting for column
    READY = "ready"  # Both entered, placement pending
