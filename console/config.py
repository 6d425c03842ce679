"""
Console configuration for TicTacToe.
Commands, prompts, and messages written by the text controller.
"""


class ConsoleConfig:
    """
    Configuration class for console settings.
    The message text is matched exactly by anyone reading the transcript,
    so change it with care.
    """

    # ==================== INPUT ====================
    # Compared case-insensitively
    QUIT_TOKEN = "q"

    # Positions must fit a signed 32-bit integer; anything wider is not a number
    MIN_NUMBER = -2 ** 31
    MAX_NUMBER = 2 ** 31 - 1

    # ==================== OUTPUT ====================
    PROMPT = "Enter a move for {player}:\n"
    INVALID_MOVE = "Invalid move. Try again.\n"
    NOT_A_NUMBER = "Please enter numbers for position.\n"
    QUIT_MESSAGE = "Game quit! Ending game state:\n"
    GAME_OVER = "Game is over! "
    WINNER = "{player} wins.\n"
    TIE = "Tie game.\n"

    # ==================== LOGGING ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
