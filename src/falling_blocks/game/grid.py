from __future__ import annotations

from typing import Iterator, Sequence, Tuple

import numpy as np


class Grid:
    """Rectangular matrix of booleans.

    Used as the occupancy body of a piece. Rotations never mutate the grid,
    they return a new one with rows and columns swapped.
    """

    def __init__(self, rows: int, columns: int) -> None:
        self.rows = int(rows)
        self.columns = int(columns)
        self.cells = np.zeros((self.rows, self.columns), dtype=np.bool_)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        data = np.array(rows, dtype=np.bool_)
        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Grid":
        grid = cls(data.shape[0], data.shape[1])
        grid.cells[:, :] = data
        return grid

    def rotate_clockwise(self) -> "Grid":
        # (x, y) -> (y, rows - 1 - x)
        return Grid._wrap(np.rot90(self.cells, 1, axes=(1, 0)))

    def rotate_counter_clockwise(self) -> "Grid":
        # (x, y) -> (columns - 1 - y, x)
        return Grid._wrap(np.rot90(self.cells, 1, axes=(0, 1)))

    def occupied(self) -> Iterator[Tuple[int, int]]:
        for row, column in zip(*np.nonzero(self.cells)):
            yield int(row), int(column)

    def count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def copy(self) -> "Grid":
        return Grid._wrap(self.cells)

    def __getitem__(self, index: Tuple[int, int]) -> bool:
        return bool(self.cells[index])

    def __setitem__(self, index: Tuple[int, int], value: bool) -> None:
        self.cells[index] = bool(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells.shape == other.cells.shape and bool(np.array_equal(self.cells, other.cells))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = "/".join("".join("#" if c else "." for c in row) for row in self.cells)
        return f"Grid({self.rows}x{self.columns}, {body})"
