"""
Game configuration for TicTacToe.
Board geometry and console glyphs.
"""


class GameConfig:
    """
    Configuration class for the board and rules.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

    # Value stored in an empty cell
    EMPTY = 0

    # ==================== DISPLAY SETTINGS ====================
    # Glyph for each cell value (EMPTY, X, O)
    GLYPHS = {0: " ", 1: "X", 2: "O"}
