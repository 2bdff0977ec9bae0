"""
Turn driver: active player, pending row/column, and alternation.
"""
from dataclasses import dataclass, field
from typing import Optional
import logging

from tictactoe.core import (
    Player,
    GameStatus,
    TurnPhase,
    PlacementError,
    TurnOrderError,
    GameOverError,
)
from tictactoe.board import Board

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """
    Drives one game on a single Board.

    A turn is a row followed by a column. The move is placed as soon as
    the column arrives; a rejected move clears both values without
    consuming the turn. Once the board reports a win or a draw, no more
    input is accepted.
    """
    board: Board = field(default_factory=Board)
    active_player: Player = Player.ONE

    pending_row: Optional[int] = None
    pending_col: Optional[int] = None

    last_status: GameStatus = field(init=False, default_factory=GameStatus.ongoing)
    moves_played: int = 0

    def __post_init__(self):
        # A board handed in mid-game may already be decided
        self.last_status = self.board.status()

    @property
    def phase(self) -> TurnPhase:
        """Input phase of the current turn."""
        if self.pending_row is None:
            if self.pending_col is not None:
                raise TurnOrderError("Column can not be set before row")
            return TurnPhase.AWAITING_ROW
        if self.pending_col is None:
            return TurnPhase.AWAITING_COL
        return TurnPhase.READY

    @property
    def is_over(self) -> bool:
        return self.last_status.is_terminal

    def status(self) -> GameStatus:
        """Evaluate the board now."""
        return self.board.status()

    def submit_row(self, value: int) -> None:
        """
        Record the row of the pending move.

        Raises:
            GameOverError: If the game has ended
            TurnOrderError: If a row is already pending
        """
        self._ensure_not_over()
        if self.phase is not TurnPhase.AWAITING_ROW:
            raise TurnOrderError(
                f"Row already set to {self.pending_row}, a column is expected"
            )
        self.pending_row = value
        logger.debug(f"Player {self.active_player} selected row {value}")

    def submit_col(self, value: int) -> GameStatus:
        """
        Record the column and place the pending move.

        Args:
            value: Zero-indexed column

        Returns:
            Board status after the move

        Raises:
            GameOverError: If the game has ended
            TurnOrderError: If no row is pending
            PlacementError: If the board rejects the move (input is reset)
        """
        self._ensure_not_over()
        if self.phase is not TurnPhase.AWAITING_COL:
            raise TurnOrderError("Column can not be set before row")
        self.pending_col = value

        row, col = self.pending_row, self.pending_col
        player = self.active_player
        try:
            self.board.place(player, row, col)
        except PlacementError as e:
            logger.warning(f"Player {player} move rejected: {e}")
            raise
        finally:
            self.reset_pending()

        self.moves_played += 1
        self.swap_player()
        self.last_status = self.board.status()

        if self.last_status.is_terminal:
            logger.info(f"Game finished after {self.moves_played} moves: {self.last_status}")

        return self.last_status

    def submit(self, value: int) -> Optional[GameStatus]:
        """
        Route a coordinate to the row or column depending on the phase.

        Returns:
            None after a row, the board status after a column
        """
        if self.phase is TurnPhase.AWAITING_ROW:
            self.submit_row(value)
            return None
        return self.submit_col(value)

    def swap_player(self) -> None:
        """Hand the turn to the other player."""
        self.active_player = self.active_player.other()
        logger.debug(f"Next player: {self.active_player}")

    def reset_pending(self) -> None:
        """Drop any partially entered move."""
        self.pending_row = None
        self.pending_col = None

    def _ensure_not_over(self) -> None:
        if self.is_over:
            raise GameOverError(f"Game is over: {self.last_status}")
