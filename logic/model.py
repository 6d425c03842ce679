"""
TicTacToe model.
Owns a single GameState and applies the rules to every move.
"""

from enum import Enum
from typing import Optional, List, Tuple

from .config import GameConfig
from .game_state import Board, GameState, Move, Player
from .move_validator import MoveValidator
from .win_checker import WinChecker


class GameStatus(Enum):
    """Where the game stands. Everything except IN_PROGRESS is final."""
    IN_PROGRESS = "in_progress"
    WON_BY_X = "won_by_x"
    WON_BY_O = "won_by_o"
    DRAW = "draw"


class TicTacToeModel:
    """
    A game of TicTacToe on a 3x3 board.

    X moves first and players alternate. The game ends when one player
    has three marks in a row, column, or diagonal, or when the board is
    full with no winner (a draw). Illegal moves raise and leave the
    game untouched.
    """

    def __init__(self):
        self._state = GameState(current_player=GameConfig.FIRST_PLAYER)
        self._validator = MoveValidator()
        self._win_checker = WinChecker()

    def move(self, row: int, col: int) -> None:
        """
        Place the current player's mark at (row, col).

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Raises:
            InvalidArgumentError: position off the board or already taken.
            InvalidStateError: the game is already over.
        """
        self._validator.validate_move(self._state, row, col)

        self._state.place(row, col)

        if self._win_checker.check_winner(self._state.board) is not None:
            self._state.winner = self._state.current_player
            self._state.is_game_over = True
        elif self._win_checker.is_board_full(self._state.board):
            self._state.is_game_over = True
        else:
            self._state.current_player = self._state.current_player.opposite()

    def get_turn(self) -> Player:
        """Player whose turn it is. After the game ends, the last mover."""
        return self._state.current_player

    def is_game_over(self) -> bool:
        return self._state.is_game_over

    def get_winner(self) -> Optional[Player]:
        """The winner, or None while playing or after a draw."""
        return self._state.winner

    def get_board(self) -> Board:
        """A new copy of the board on every call."""
        return self._state.copy_board()

    def get_mark_at(self, row: int, col: int) -> Optional[Player]:
        """
        Mark at (row, col), or None if the cell is empty.

        Raises:
            InvalidArgumentError: position off the board.
        """
        self._validator.check_bounds(row, col)
        return self._state.board[row][col]

    def get_moves(self) -> List[Move]:
        """Moves played so far, oldest first."""
        return list(self._state.moves)

    def get_winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """Cells of the completed line, or None if nobody has won."""
        return self._win_checker.get_winning_line(self._state.board)

    def get_status(self) -> GameStatus:
        if not self._state.is_game_over:
            return GameStatus.IN_PROGRESS
        if self._state.winner == Player.X:
            return GameStatus.WON_BY_X
        if self._state.winner == Player.O:
            return GameStatus.WON_BY_O
        return GameStatus.DRAW

    def __str__(self) -> str:
        rows = []
        for row in self.get_board():
            cells = [
                GameConfig.EMPTY_CELL if mark is None else str(mark)
                for mark in row
            ]
            rows.append(GameConfig.ROW_PREFIX + GameConfig.CELL_SEPARATOR.join(cells))
        return GameConfig.ROW_SEPARATOR.join(rows)


# Quick test
if __name__ == "__main__":
    print("Testing TicTacToeModel...")

    game = TicTacToeModel()

    # X takes the top row
    for row, col in [(0, 0), (1, 0), (0, 1), (2, 0), (0, 2)]:
        print(f"\n{game.get_turn()} moves to ({row}, {col})")
        game.move(row, col)
        print(game)

    assert game.get_winner() == Player.X
    print(f"\nWinner: {game.get_winner()} via {game.get_winning_line()}")

    print("\nModel test done!")
