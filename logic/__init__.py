"""
Logic module for TicTacToe.
Handles game state, rules, and the model the controllers drive.
"""

from .game_state import GameState, Move, Player
from .errors import TicTacToeError, InvalidArgumentError, InvalidStateError
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .model import GameStatus, TicTacToeModel
