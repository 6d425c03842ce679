"""
Errors raised by the TicTacToe model and controllers.
"""


class TicTacToeError(Exception):
    """Base class for all game errors."""


class InvalidArgumentError(TicTacToeError, ValueError):
    """
    A call was given a bad argument: a position off the board,
    a cell that is already taken, or a missing required object.
    """


class InvalidStateError(TicTacToeError, RuntimeError):
    """
    The game (or its I/O) is in a state where the request cannot be served:
    a move after the game ended, output that cannot be written, or input
    that ran out before the game finished.
    """
