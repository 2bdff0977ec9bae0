"""
Parsing of console input.
"""
from typing import Tuple

from tictactoe.core import InvalidInputError

OPTIONS: Tuple[str, ...] = (
    "These are your options:",
    "",
    "q | quit    exits TicTacToe",
    "p | play    starts the game",
    "",
)


def cleaned(text: str) -> str:
    return text.strip()


def is_quit(text: str) -> bool:
    return cleaned(text).lower() in ("q", "quit")


def is_play(text: str) -> bool:
    return cleaned(text).lower() in ("p", "play")


def parse_coordinate(text: str, one_indexed: bool = True) -> int:
    """
    Parse a row or column number typed by a player.

    Args:
        text: Raw input
        one_indexed: Input counts from 1 (converted to zero-indexed)

    Returns:
        Zero-indexed coordinate. The upper bound is checked by the board.

    Raises:
        InvalidInputError: If the text is not an unsigned integer, or is 0
            while one_indexed
    """
    value = cleaned(text)
    if not value.isdigit() or not value.isascii():
        raise InvalidInputError(f"{value!r} is not a valid number")

    number = int(value)
    if not one_indexed:
        return number
    if number == 0:
        raise InvalidInputError("Numbers start at 1")
    return number - 1
