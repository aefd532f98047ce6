"""Square tic-tac-toe board of any size."""

from __future__ import annotations

from typing import List

EMPTY = " "


class Board:
    """An N x N grid of cells, each empty or holding a piece character."""

    def __init__(self, size: int = 3) -> None:
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size
        self.cells: List[List[str]] = []
        self.reset()

    def reset(self) -> None:
        """Empty every cell."""
        self.cells = [[EMPTY] * self.size for _ in range(self.size)]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"position ({row}, {col}) is off the board")

    def add_piece(self, row: int, col: int, piece: str) -> bool:
        """Place ``piece`` at (row, col); False if the cell is taken.

        Raises IndexError for a position off the board.
        """
        self._check(row, col)
        if self.cells[row][col] != EMPTY:
            return False
        self.cells[row][col] = piece
        return True

    def has_free_cells(self) -> bool:
        return any(cell == EMPTY for row in self.cells for cell in row)

    def render(self) -> str:
        """Return the board, one line per row."""
        return "".join(
            "".join(f"{cell}    | " for cell in row) + "\n" for row in self.cells
        )