"""
Core module - shared data types, errors, and configuration.
"""
from .types import (
    BOARD_SIZE,
    Player,
    Outcome,
    GameStatus,
    Move,
    TurnPhase,
)
from .errors import (
    TicTacToeError,
    PlacementError,
    OutOfRangeError,
    AlreadyOccupiedError,
    InvalidInputError,
    TurnOrderError,
    GameOverError,
    InconsistentBoardError,
)
from .io_utils import (
    load_yaml,
)
from .config_loader import Config, DEFAULT_CONFIG_PATH

__all__ = [
    # Types
    "BOARD_SIZE",
    "Player",
    "Outcome",
    "GameStatus",
    "Move",
    "TurnPhase",
    # Errors
    "TicTacToeError",
    "PlacementError",
    "OutOfRangeError",
    "AlreadyOccupiedError",
    "InvalidInputError",
    "TurnOrderError",
    "GameOverError",
    "InconsistentBoardError",
    # I/O
    "load_yaml",
    # Config
    "Config",
    "DEFAULT_CONFIG_PATH",
]
