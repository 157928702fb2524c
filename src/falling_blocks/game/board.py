from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .exceptions import InvariantViolation
from .pieces import Piece, PieceKind


EMPTY = 0

Footprint = Tuple[np.ndarray, np.ndarray]


class Board:
    """Matrix of cell labels with piece placement and line clearing.

    The grid uses 0 for empty cells and `int(PieceKind)` for filled cells.
    Placement coordinates always name where the piece's pivot sits, not
    its top-left corner. Failed operations leave the board untouched.
    """

    def __init__(self, rows: int = 20, columns: int = 11) -> None:
        self.rows = int(rows)
        self.columns = int(columns)
        self.cells = np.zeros((self.rows, self.columns), dtype=np.int8)

    def cell(self, row: int, column: int) -> Optional[PieceKind]:
        value = int(self.cells[row, column])
        return None if value == EMPTY else PieceKind(value)

    def is_empty(self, row: int, column: int) -> bool:
        return int(self.cells[row, column]) == EMPTY

    def _footprint(self, piece: Piece, row: int, column: int) -> Optional[Footprint]:
        """Board indices covered by the piece body, or None if out of bounds."""
        pivot = piece.pivot
        # Bounds are checked before any subtraction can go negative.
        if row < 0 or column < 0 or row >= self.rows or column >= self.columns:
            return None
        if row < pivot.row or column < pivot.column:
            return None

        top, left = row - pivot.row, column - pivot.column
        bottom = top + piece.body.rows - 1
        right = left + piece.body.columns - 1
        if top >= self.rows or left >= self.columns:
            return None
        if bottom >= self.rows or right >= self.columns:
            return None

        body_rows, body_columns = np.nonzero(piece.body.cells)
        return body_rows + top, body_columns + left

    def can_place(self, piece: Piece, row: int, column: int) -> bool:
        footprint = self._footprint(piece, row, column)
        if footprint is None:
            return False
        return bool(np.all(self.cells[footprint] == EMPTY))

    def place(self, piece: Piece, row: int, column: int) -> bool:
        if piece.kind is None or not self.can_place(piece, row, column):
            return False
        self.cells[self._footprint(piece, row, column)] = int(piece.kind)
        return True

    def can_remove(self, piece: Piece, row: int, column: int) -> bool:
        if piece.kind is None:
            return False
        footprint = self._footprint(piece, row, column)
        if footprint is None:
            return False
        # Only cells labelled with this piece's kind may be erased.
        return bool(np.all(self.cells[footprint] == int(piece.kind)))

    def remove(self, piece: Piece, row: int, column: int) -> bool:
        if not self.can_remove(piece, row, column):
            return False
        self.cells[self._footprint(piece, row, column)] = EMPTY
        return True

    def clear_completed_rows(self) -> int:
        complete = np.all(self.cells != EMPTY, axis=1)
        num = int(np.count_nonzero(complete))
        if num == 0:
            return 0
        # Keep incomplete rows in order and pad with empty rows at the top
        kept = self.cells[~complete]
        new_rows = np.zeros((num, self.columns), dtype=np.int8)
        self.cells = np.vstack((new_rows, kept))
        if self.cells.shape != (self.rows, self.columns):
            raise InvariantViolation(f"board reshaped to {self.cells.shape} while clearing rows")
        return num

    def occupancy(self) -> np.ndarray:
        return self.cells != EMPTY

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def as_array(self) -> np.ndarray:
        return self.cells.copy()

    def copy(self) -> "Board":
        board = Board(self.rows, self.columns)
        board.cells = self.cells.copy()
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells.shape == other.cells.shape and bool(np.array_equal(self.cells, other.cells))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join("".join("█" if cell else "·" for cell in row) for row in self.cells)

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, columns={self.columns}, filled={self.filled_count()})"
