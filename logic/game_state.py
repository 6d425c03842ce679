"""
Game state for TicTacToe.
Tracks the board, current player, result, and move history.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    def __str__(self) -> str:
        return self.value


Board = List[List[Optional[Player]]]


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (0-8)


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board (which marks are where)
    - Current player
    - Move history
    - Game status (ongoing, won, draw)

    Placing marks here does not check any rules; TicTacToeModel does that.
    """

    # The 3x3 board - None means empty
    board: Board = field(
        default_factory=lambda: [[None for _ in range(3)] for _ in range(3)]
    )

    # Current player's turn
    current_player: Player = Player.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Player] = None
    is_game_over: bool = False

    @property
    def is_draw(self) -> bool:
        """True once the game ended with nobody winning."""
        return self.is_game_over and self.winner is None

    def place(self, row: int, col: int) -> Move:
        """
        Put the current player's mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The recorded Move.
        """
        self.board[row][col] = self.current_player

        move = Move(
            player=self.current_player,
            row=row,
            col=col,
            move_number=len(self.moves)
        )
        self.moves.append(move)
        return move

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        empty = []
        for row in range(3):
            for col in range(3):
                if self.board[row][col] is None:
                    empty.append((row, col))
        return empty

    def copy_board(self) -> Board:
        """Fresh copy of the grid; callers may mutate it freely."""
        return [[cell for cell in row] for row in self.board]
