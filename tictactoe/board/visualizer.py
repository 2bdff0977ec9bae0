"""
Board image rendering with OpenCV.
"""
import cv2
import numpy as np
from typing import Dict, List, Optional, Tuple
import logging

from tictactoe.core import Player
from .grid import Board

logger = logging.getLogger(__name__)


class BoardVisualizer:
    """
    Renders the grid, player marks and winning lines onto a BGR image.
    """

    # Color scheme (BGR)
    COLORS = {
        "background": (40, 40, 40),
        "grid": (220, 220, 220),
        "one": (255, 200, 0),  # Blue-ish X
        "two": (0, 0, 255),  # Red O
        "win": (0, 255, 255),  # Yellow
        "text": (255, 255, 255),
    }

    def __init__(
            self,
            cell_size_px: int = 120,
            margin_px: int = 20,
            line_thickness: int = 4,
            mark_thickness: int = 8
    ):
        """
        Initialize visualizer.

        Args:
            cell_size_px: Edge length of one cell
            margin_px: Border around the grid
            line_thickness: Grid line thickness
            mark_thickness: X/O stroke thickness
        """
        if cell_size_px <= 0:
            raise ValueError("cell_size_px must be positive")
        self.cell_size = cell_size_px
        self.margin = max(0, margin_px)
        self.line_thickness = max(1, line_thickness)
        self.mark_thickness = max(1, mark_thickness)

    @classmethod
    def from_config(cls, render_config: Dict) -> "BoardVisualizer":
        """Build from the "render" config section."""
        return cls(
            cell_size_px=render_config.get("cell_size_px", 120),
            margin_px=render_config.get("margin_px", 20),
            line_thickness=render_config.get("line_thickness", 4),
            mark_thickness=render_config.get("mark_thickness", 8),
        )

    def image_size(self, board: Board) -> Tuple[int, int]:
        """(height, width) in pixels for a board."""
        height, width = board.dimensions()
        return (
            2 * self.margin + height * self.cell_size,
            2 * self.margin + width * self.cell_size,
        )

    def cell_center(self, row: int, col: int) -> Tuple[int, int]:
        """Pixel (x, y) center of a cell."""
        x = self.margin + col * self.cell_size + self.cell_size // 2
        y = self.margin + row * self.cell_size + self.cell_size // 2
        return x, y

    def cell_at(self, x: int, y: int, board: Board) -> Optional[Tuple[int, int]]:
        """
        Map a pixel to the (row, col) under it.

        Returns:
            (row, col) or None if the pixel is outside the grid
        """
        col = (x - self.margin) // self.cell_size
        row = (y - self.margin) // self.cell_size
        if x < self.margin or y < self.margin or not board.in_range(row, col):
            return None
        return int(row), int(col)

    def draw_board(self, board: Board, highlight_winner: bool = True) -> np.ndarray:
        """
        Draw the full board.

        Args:
            board: Board to draw
            highlight_winner: Draw a stroke over each winning line

        Returns:
            BGR image
        """
        img_h, img_w = self.image_size(board)
        image = np.full((img_h, img_w, 3), self.COLORS["background"], dtype=np.uint8)

        self._draw_grid(image, board)

        for r, row in enumerate(board.render_rows()):
            for c, cell in enumerate(row):
                if cell is Player.ONE:
                    self._draw_x(image, r, c)
                elif cell is Player.TWO:
                    self._draw_o(image, r, c)

        if highlight_winner:
            for line, player in board.winning_lines():
                coords = line.coords
                start = self.cell_center(*coords[0])
                end = self.cell_center(*coords[-1])
                cv2.line(image, start, end, self.COLORS["win"], self.mark_thickness, cv2.LINE_AA)
                logger.debug(f"Highlighted {line.name} for player {player}")

        return image

    def _draw_grid(self, image: np.ndarray, board: Board) -> None:
        height, width = board.dimensions()
        top = self.margin
        left = self.margin
        bottom = self.margin + height * self.cell_size
        right = self.margin + width * self.cell_size

        for c in range(1, width):
            x = left + c * self.cell_size
            cv2.line(image, (x, top), (x, bottom), self.COLORS["grid"], self.line_thickness)
        for r in range(1, height):
            y = top + r * self.cell_size
            cv2.line(image, (left, y), (right, y), self.COLORS["grid"], self.line_thickness)

    def _draw_x(self, image: np.ndarray, row: int, col: int) -> None:
        cx, cy = self.cell_center(row, col)
        half = int(self.cell_size * 0.3)
        color = self.COLORS["one"]
        cv2.line(image, (cx - half, cy - half), (cx + half, cy + half),
                 color, self.mark_thickness, cv2.LINE_AA)
        cv2.line(image, (cx + half, cy - half), (cx - half, cy + half),
                 color, self.mark_thickness, cv2.LINE_AA)

    def _draw_o(self, image: np.ndarray, row: int, col: int) -> None:
        center = self.cell_center(row, col)
        radius = int(self.cell_size * 0.32)
        cv2.circle(image, center, radius, self.COLORS["two"], self.mark_thickness, cv2.LINE_AA)

    def draw_info_panel(
            self,
            image: np.ndarray,
            lines: List[str],
            position: Tuple[int, int] = (10, 20)
    ) -> np.ndarray:
        """
        Draw text lines over the image.

        Args:
            image: Input image
            lines: Text to display, one entry per line
            position: Top-left position (x, y)

        Returns:
            Copy of the image with the panel
        """
        result = image.copy()
        x, y = position
        line_height = 22

        for i, text in enumerate(lines):
            cv2.putText(
                result,
                text,
                (x, y + i * line_height),
                cv2.FONT_HERSHEY_SIMPLEX,
                0.55,
                self.COLORS["text"],
                1,
                cv2.LINE_AA
            )

        return result
