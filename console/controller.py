"""
Console controller for TicTacToe.
Reads moves as whitespace-separated tokens and writes the game transcript.

Input format, per turn:
    <row> <col>   1-based position, e.g. "2 2" for the center
    q             quit (either token may be q)
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Iterator, Optional, TextIO

from logic.errors import InvalidArgumentError, InvalidStateError
from logic.model import TicTacToeModel
from .config import ConsoleConfig

logger = logging.getLogger(__name__)

# Plain ASCII integers only; int() alone would accept "1_0" and non-ASCII digits
_INTEGER = re.compile(r"[+-]?[0-9]+")


class TicTacToeController(ABC):
    """
    Drives a game of TicTacToe from some source of user input.
    """

    @abstractmethod
    def play_game(self, model: TicTacToeModel) -> None:
        """
        Play a single game on the given model, returning when it is over
        or the user quits.

        Raises:
            InvalidArgumentError: model is None.
            InvalidStateError: input or output failed.
        """


class _QuitRequested(Exception):
    """User typed the quit token."""


class _NotANumber(Exception):
    """Token could not be read as a position."""


class TicTacToeConsoleController(TicTacToeController):
    """
    Plays TicTacToe over a text stream.

    Args:
        in_stream: Readable text source (e.g. sys.stdin or io.StringIO).
        out: Anything with a write(str) method (e.g. sys.stdout).
    """

    def __init__(self, in_stream: TextIO, out: TextIO):
        if in_stream is None or out is None:
            raise InvalidArgumentError("Input/Output sources cannot be None")

        self._in = in_stream
        self._out = out
        self._tokens = self._read_tokens()

    def play_game(self, model: TicTacToeModel) -> None:
        if model is None:
            raise InvalidArgumentError("Model cannot be None")

        # Main game loop
        while not model.is_game_over():
            self._write_board(model)
            self._write(ConsoleConfig.PROMPT.format(player=model.get_turn()))

            try:
                row = self._next_position()
                col = self._next_position()
            except _QuitRequested:
                logger.debug("Quit requested by %s", model.get_turn())
                self._write(ConsoleConfig.QUIT_MESSAGE)
                self._write_board(model)
                return
            except _NotANumber as e:
                logger.debug("Rejected token %r", str(e))
                self._write(ConsoleConfig.NOT_A_NUMBER)
                continue

            player = model.get_turn()
            try:
                model.move(row - 1, col - 1)
            except InvalidArgumentError as e:
                logger.debug("Invalid move (%d, %d) by %s: %s", row, col, player, e)
                self._write(ConsoleConfig.INVALID_MOVE)
            else:
                logger.debug("%s played (%d, %d)", player, row, col)

        # Game over - display final state
        self._write_board(model)
        self._write(ConsoleConfig.GAME_OVER)

        winner = model.get_winner()
        if winner is not None:
            self._write(ConsoleConfig.WINNER.format(player=winner))
        else:
            self._write(ConsoleConfig.TIE)
        logger.debug("Game finished: %s", model.get_status().value)

    def _read_tokens(self) -> Iterator[str]:
        """Yield whitespace-separated tokens, reading a line at a time."""
        for line in self._in:
            yield from line.split()

    def _next_token(self) -> str:
        token: Optional[str] = next(self._tokens, None)
        if token is None:
            raise InvalidStateError("Ran out of input")
        return token

    def _next_position(self) -> int:
        """
        Read one coordinate.

        Raises:
            _QuitRequested: the token was the quit command.
            _NotANumber: the token was not an integer.
            InvalidStateError: no more input.
        """
        token = self._next_token()
        if token.lower() == ConsoleConfig.QUIT_TOKEN:
            raise _QuitRequested()
        if not _INTEGER.fullmatch(token):
            raise _NotANumber(token)
        try:
            value = int(token)
        except ValueError:
            # Too many digits to convert
            raise _NotANumber(token)
        if not ConsoleConfig.MIN_NUMBER <= value <= ConsoleConfig.MAX_NUMBER:
            raise _NotANumber(token)
        return value

    def _write_board(self, model: TicTacToeModel) -> None:
        self._write(str(model) + "\n")

    def _write(self, text: str) -> None:
        try:
            self._out.write(text)
        except (OSError, ValueError) as e:
            raise InvalidStateError("Failed to transmit output") from e
