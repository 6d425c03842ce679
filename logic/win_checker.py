"""
Win checker for TicTacToe.
Checks if a player has won or if the board is full.
"""

from typing import Optional, List, Tuple
from .game_state import Board, Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Every line is scanned, not only the ones through the last move.

        Args:
            board: The game board.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        board: Board,
        line: List[Tuple[int, int]]
    ) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The Player filling all 3 cells, None otherwise.
        """
        marks = [board[row][col] for row, col in line]

        if marks[0] is not None and marks[0] == marks[1] == marks[2]:
            return marks[0]

        return None

    def is_board_full(self, board: Board) -> bool:
        """True if no cell is empty."""
        return all(cell is not None for row in board for cell in row)

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            board: The game board.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None
