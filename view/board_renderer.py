"""
Board renderer for TicTacToe.
Draws a board with OpenCV and maps clicks back to cells.
"""

import cv2
import numpy as np
from typing import Optional, Tuple

from engine.board import Board, Symbol, cell_to_row_col, row_col_to_cell
from .config import ViewConfig


class BoardRenderer:
    """
    Renders boards to BGR images.

    The image is the square board on top and a status bar below it.
    """

    def __init__(self, config: Optional[ViewConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: View configuration. Uses default if None.
        """
        self.config = config or ViewConfig()

    @property
    def image_size(self) -> Tuple[int, int]:
        """(width, height) of rendered images."""
        width = self.config.BOARD_PIXELS
        return width, width + self.config.STATUS_BAR_HEIGHT

    def render(
        self,
        board: Board,
        status: str = "",
        winning_line: Optional[Tuple[int, int, int]] = None
    ) -> np.ndarray:
        """
        Render a board.

        Args:
            board: Board to draw.
            status: Text for the status bar.
            winning_line: Cells to strike through, if any.

        Returns:
            BGR image of shape (height, width, 3).
        """
        cfg = self.config
        width, height = self.image_size

        image = np.full((height, width, 3), cfg.BACKGROUND_COLOR, dtype=np.uint8)

        self._draw_grid(image)

        for cell, value in enumerate(board):
            if value is not None:
                self._draw_marker(image, cell, value)

        if winning_line is not None:
            self._draw_winning_line(image, winning_line)

        self._draw_status(image, status)
        return image

    def pixel_to_cell(self, x: float, y: float) -> Optional[int]:
        """
        Convert a pixel position on the rendered image to a cell.

        Args:
            x: Pixel column.
            y: Pixel row.

        Returns:
            Cell index, or None if outside the board (e.g. status bar).
        """
        size = self.config.BOARD_PIXELS
        if not (0 <= x < size and 0 <= y < size):
            return None

        col = int(x) // self.config.CELL_PIXELS
        row = int(y) // self.config.CELL_PIXELS
        return row_col_to_cell(row, col)

    def cell_center(self, cell: int) -> Tuple[int, int]:
        """Get the pixel (x, y) of a cell center."""
        row, col = cell_to_row_col(cell)
        half = self.config.CELL_PIXELS // 2
        return col * self.config.CELL_PIXELS + half, row * self.config.CELL_PIXELS + half

    def _draw_grid(self, image: np.ndarray):
        cfg = self.config
        size = cfg.BOARD_PIXELS

        for i in range(1, cfg.BOARD_SIZE):
            # Vertical lines
            x = i * cfg.CELL_PIXELS
            cv2.line(image, (x, 0), (x, size), cfg.GRID_COLOR, cfg.GRID_THICKNESS)
            # Horizontal lines
            y = i * cfg.CELL_PIXELS
            cv2.line(image, (0, y), (size, y), cfg.GRID_COLOR, cfg.GRID_THICKNESS)

        cv2.rectangle(image, (0, 0), (size - 1, size - 1), cfg.GRID_COLOR, cfg.GRID_THICKNESS)

        if cfg.SHOW_CELL_LABELS:
            for cell in range(cfg.BOARD_SIZE * cfg.BOARD_SIZE):
                row, col = cell_to_row_col(cell)
                cv2.putText(
                    image,
                    str(cell),
                    (col * cfg.CELL_PIXELS + 8, row * cfg.CELL_PIXELS + 20),
                    cfg.FONT,
                    cfg.LABEL_FONT_SCALE,
                    cfg.LABEL_COLOR,
                    1
                )

    def _draw_marker(self, image: np.ndarray, cell: int, symbol: Symbol):
        cfg = self.config
        cx, cy = self.cell_center(cell)
        marker_size = cfg.CELL_PIXELS // 2 - cfg.MARKER_MARGIN

        if symbol == Symbol.X:
            cv2.line(image,
                     (cx - marker_size, cy - marker_size),
                     (cx + marker_size, cy + marker_size),
                     cfg.X_COLOR, cfg.MARKER_THICKNESS)
            cv2.line(image,
                     (cx + marker_size, cy - marker_size),
                     (cx - marker_size, cy + marker_size),
                     cfg.X_COLOR, cfg.MARKER_THICKNESS)
        else:
            cv2.circle(image, (cx, cy), marker_size, cfg.O_COLOR, cfg.MARKER_THICKNESS)

    def _draw_winning_line(self, image: np.ndarray, line: Tuple[int, int, int]):
        # Stroke from the first to the last cell of the line
        start = self.cell_center(line[0])
        end = self.cell_center(line[-1])
        cv2.line(image, start, end, self.config.WIN_LINE_COLOR, self.config.WIN_LINE_THICKNESS)

    def _draw_status(self, image: np.ndarray, status: str):
        cfg = self.config
        top = cfg.BOARD_PIXELS
        width = image.shape[1]

        cv2.rectangle(image, (0, top), (width, image.shape[0]), cfg.STATUS_BG_COLOR, -1)
        if status:
            cv2.putText(
                image,
                status,
                (15, top + cfg.STATUS_BAR_HEIGHT // 2 + 10),
                cfg.FONT,
                cfg.STATUS_FONT_SCALE,
                cfg.STATUS_TEXT_COLOR,
                2
            )
