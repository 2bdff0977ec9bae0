"""
Line-driven console session: menu, turn prompts and result banners.

The session never reads or prints by itself. Each call to handle() takes
one line of input and returns the lines to show, so any front end (stdin,
a test, a chat bot) can drive it.
"""
from typing import List, Optional
import logging

from tictactoe.core import (
    Config,
    Player,
    TurnPhase,
    PlacementError,
    InvalidInputError,
)
from tictactoe.board import Board, render_board, format_status
from .game_state import GameState
from .commands import OPTIONS, is_play, is_quit, parse_coordinate

logger = logging.getLogger(__name__)

GOODBYE = "Thanks for playing. Come back soon!"


class GameSession:
    """Menu and turn loop around GameState."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize session.

        Args:
            config: Game configuration (default: built-in defaults)
        """
        self.config = config or Config()
        self.starting_player: Player = self.config.starting_player()
        self.one_indexed: bool = bool(self.config.get("game", "one_indexed_input", True))

        self.game: Optional[GameState] = None
        self.games_played = 0
        self.stopped = False

    @property
    def in_game(self) -> bool:
        return self.game is not None and not self.game.is_over

    def intro(self) -> List[str]:
        return ["Welcome to TicTacToe.", "", *OPTIONS]

    def start_game(self) -> List[str]:
        """Start a new game on a fresh board."""
        self.game = GameState(board=Board(), active_player=self.starting_player)
        logger.info(f"Game started, player {self.starting_player} begins")
        return self.prompt()

    def prompt(self) -> List[str]:
        """Turn header, board and the request for the next number."""
        if not self.in_game:
            return list(OPTIONS)

        lines = [f"It is player {self.game.active_player}'s turn", ""]
        lines.extend(render_board(self.game.board.render_rows()))
        lines.append("")
        if self.game.phase is TurnPhase.AWAITING_ROW:
            lines.append("Please enter a row number")
        else:
            lines.append("Please enter a column number")
        return lines

    def handle(self, line: str) -> List[str]:
        """
        Process one line of input.

        Args:
            line: Raw input line

        Returns:
            Lines to display
        """
        if self.stopped:
            return []

        if is_quit(line):
            self.stop()
            return [GOODBYE]

        if not self.in_game:
            if is_play(line):
                return self.start_game()
            return list(OPTIONS)

        return self._handle_coordinate(line)

    def stop(self) -> None:
        self.stopped = True
        logger.info(f"Session stopped after {self.games_played} finished games")

    def _handle_coordinate(self, line: str) -> List[str]:
        game = self.game
        label = "row" if game.phase is TurnPhase.AWAITING_ROW else "column"

        try:
            value = parse_coordinate(line, one_indexed=self.one_indexed)
        except InvalidInputError as e:
            first, last = self._coordinate_range()
            return [
                f"Please enter a valid {label}-number. The range is: {first} - {last}, Err: {e}",
                *self.prompt(),
            ]

        try:
            status = game.submit(value)
        except PlacementError as e:
            return [str(e), *self.prompt()]

        if status is None or not status.is_terminal:
            return self.prompt()

        self.games_played += 1
        lines = render_board(game.board.render_rows())
        lines.extend(["", format_status(status), "", *OPTIONS])
        return lines

    def _coordinate_range(self):
        height, width = self.game.board.dimensions()
        last = max(height, width)
        if self.one_indexed:
            return 1, last
        return 0, last - 1
