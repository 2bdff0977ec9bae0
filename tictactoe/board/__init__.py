"""
Board module - grid model, win/draw evaluation, and text rendering.

The OpenCV renderer lives in tictactoe.board.visualizer and is imported
explicitly; it needs the "render" extra (opencv-python).
"""
from .grid import Board, EMPTY
from .lines import Line, enumerate_lines, line_winner
from .text_renderer import render_line, render_board, format_status

__all__ = [
    "Board",
    "EMPTY",
    "Line",
    "enumerate_lines",
    "line_winner",
    "render_line",
    "render_board",
    "format_status",
]
