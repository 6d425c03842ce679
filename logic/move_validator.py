"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import List, Tuple
from .config import GameConfig
from .errors import InvalidArgumentError, InvalidStateError
from .game_state import GameState


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Position must be on the board
    2. Game must not be over
    3. Can only place on empty cells

    A failed check raises; nothing is changed.
    """

    def check_bounds(self, row: int, col: int) -> None:
        """
        Raise InvalidArgumentError unless (row, col) is on the board.
        """
        size = GameConfig.BOARD_SIZE
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(
                    f"Invalid position ({row!r}, {col!r}). Must be integers."
                )
        if not (0 <= row < size and 0 <= col < size):
            raise InvalidArgumentError(
                f"Invalid position ({row}, {col}). Must be 0-{size - 1}."
            )

    def validate_move(self, game_state: GameState, row: int, col: int) -> None:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place mark (0-2).
            col: Column to place mark (0-2).

        Raises:
            InvalidArgumentError: off the board or cell already occupied.
            InvalidStateError: the game is already over.
        """
        self.check_bounds(row, col)

        if game_state.is_game_over:
            raise InvalidStateError("Game is already over!")

        occupant = game_state.board[row][col]
        if occupant is not None:
            raise InvalidArgumentError(
                f"Cell ({row}, {col}) is already occupied by {occupant}"
            )

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) valid move positions.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
