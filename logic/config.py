"""
Game configuration for TicTacToe.
Board dimensions and the text layout used when printing the board.
"""

from .game_state import Player


class GameConfig:
    """
    Configuration class for game settings.
    The board size is fixed; the rest only affects rendering.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # X always opens the game
    FIRST_PLAYER = Player.X

    # ==================== RENDERING ====================
    # Each row renders as " X | O |  " - a leading space, then cells joined
    EMPTY_CELL = " "
    ROW_PREFIX = " "
    CELL_SEPARATOR = " | "

    # Eleven dashes between rows
    ROW_SEPARATOR = "\n" + "-" * 11 + "\n"
