"""
View configuration for TicTacToe.
All the settings for drawing the board and the host windows.
"""

import cv2


class ViewConfig:
    """
    Configuration class for rendering settings.
    Change these values to restyle the board!
    """

    # ==================== BOARD IMAGE ====================
    BOARD_SIZE = 3
    BOARD_PIXELS = 450                          # Square board image
    CELL_PIXELS = BOARD_PIXELS // BOARD_SIZE    # 150 pixels per cell
    STATUS_BAR_HEIGHT = 50                      # Strip under the board

    GRID_THICKNESS = 3
    MARKER_THICKNESS = 10
    MARKER_MARGIN = CELL_PIXELS // 5            # Gap between marker and cell edge
    WIN_LINE_THICKNESS = 8

    # ==================== COLORS (BGR) ====================
    BACKGROUND_COLOR = (255, 255, 255)
    GRID_COLOR = (0, 0, 0)
    X_COLOR = (255, 0, 0)          # Blue
    O_COLOR = (0, 0, 255)          # Red
    WIN_LINE_COLOR = (0, 200, 0)   # Green
    STATUS_BG_COLOR = (46, 26, 26)
    STATUS_TEXT_COLOR = (0, 215, 255)
    LABEL_COLOR = (100, 100, 100)

    # ==================== TEXT ====================
    FONT = cv2.FONT_HERSHEY_SIMPLEX
    STATUS_FONT_SCALE = 0.8
    LABEL_FONT_SCALE = 0.5
    SHOW_CELL_LABELS = True        # Small cell index in each corner

    # ==================== WINDOWS ====================
    WINDOW_NAME = "TicTacToe"
    TK_TITLE = "TicTacToe - Time Travel"
    TK_BACKGROUND = '#1a1a2e'
    TK_GEOMETRY = "900x560"

    # ==================== KEYS (OpenCV window) ====================
    KEY_QUIT = 'q'
    KEY_RESET = 'r'
    KEY_BACK = 'b'
    KEY_FORWARD = 'f'
    KEY_SCREENSHOT = 's'

    # ==================== DEBUG SETTINGS ====================
    SCREENSHOT_PREFIX = "tictactoe"
