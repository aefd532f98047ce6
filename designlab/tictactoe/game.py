"""Two players taking turns on a tic-tac-toe board."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, Optional, Tuple

from designlab.tictactoe.board import EMPTY, Board


class PieceType(str, Enum):
    X = "X"
    O = "O"


def is_valid_piece(piece: str) -> bool:
    """Whether ``piece`` is one of the playable piece types."""
    return piece in {p.value for p in PieceType}


@dataclass(frozen=True)
class Player:
    name: str
    piece: str


def _parse_position(text: str) -> Optional[Tuple[int, int]]:
    parts = text.split()
    if len(parts) < 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


class Game:
    """Runs turns until a player wins or the board fills up."""

    def __init__(self, board: Board, ask: Callable[[str], str] = input) -> None:
        self.board = board
        self.ask = ask
        self.turns: Deque[Player] = deque()

    def initialize(self) -> None:
        self.turns.extend([Player("Player1", PieceType.X.value), Player("Player2", PieceType.O.value)])

    def _place(self, player: Player) -> Optional[Tuple[int, int]]:
        position = _parse_position(self.ask(f"\nEnter the position for Player: {player.name}"))
        if position is None:
            return None
        try:
            placed = self.board.add_piece(position[0], position[1], player.piece)
        except IndexError:
            return None
        return position if placed else None

    def start(self) -> bool:
        """Play until someone wins (True) or no cells are left (False)."""
        print(self.board.render(), end="")
        while True:
            player = self.turns.popleft()
            if not self.board.has_free_cells():
                print("\nAll Cells are completed.")
                return False
            position = self._place(player)
            if position is None:
                print("\nEnter valid position, Try Again!!!")
                self.turns.appendleft(player)
                continue
            print(self.board.render(), end="")
            if self.is_winner(position[0], position[1], player.piece):
                print(f"Player {player.name} Wins the game!!!")
                return True
            self.turns.append(player)

    def is_winner(self, row: int, col: int, piece: str) -> bool:
        """Whether ``piece`` fills row ``row``, column ``col`` or either diagonal."""
        cells = self.board.cells
        n = self.board.size

        def owned(cell: str) -> bool:
            return cell != EMPTY and cell == piece

        row_match = all(owned(cells[row][i]) for i in range(n))
        col_match = all(owned(cells[i][col]) for i in range(n))
        diagonal = all(owned(cells[i][i]) for i in range(n))
        anti_diagonal = all(owned(cells[i][n - 1 - i]) for i in range(n))
        return row_match or col_match or diagonal or anti_diagonal


def main(argv: Optional[list] = None) -> int:
    size = int(input("Enter the N X N level size for tic tac toe: "))
    game = Game(Board(size))
    game.initialize()
    if game.start():
        print("There is a winner", end="")
    else:
        print("There is a no winner, Game draw!!!", end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())