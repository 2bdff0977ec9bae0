"""
Game module - turn driver, input parsing, and console session.
"""
from .game_state import GameState
from .commands import OPTIONS, cleaned, is_quit, is_play, parse_coordinate
from .session import GameSession, GOODBYE

__all__ = [
    "GameState",
    "OPTIONS",
    "cleaned",
    "is_quit",
    "is_play",
    "parse_coordinate",
    "GameSession",
    "GOODBYE",
]
