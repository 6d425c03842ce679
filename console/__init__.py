"""
Console module for TicTacToe.
Text controllers that drive the model from an input stream.
"""

from .config import ConsoleConfig
from .controller import TicTacToeController, TicTacToeConsoleController
