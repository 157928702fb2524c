from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pivot:
    """A (row, column) coordinate.

    Used both as an absolute board location and as the rotation anchor
    inside a piece body.
    """

    row: int
    column: int

    @property
    def is_none(self) -> bool:
        return self == NO_PIVOT

    def shifted(self, d_row: int, d_column: int) -> "Pivot":
        return Pivot(self.row + d_row, self.column + d_column)


# Far outside any board; marks "no piece placed".
NO_PIVOT = Pivot(1_000_000, 1_000_000)
