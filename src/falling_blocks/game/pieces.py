from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, Optional, Sequence, Tuple

from .grid import Grid
from .pivot import NO_PIVOT, Pivot


class PieceKind(IntEnum):
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


@dataclass(frozen=True)
class Piece:
    """A tagged shape: kind, occupancy body and the pivot inside the body.

    Pieces are values. Rotation returns a new Piece and the pivot transform
    is always computed from the pre-rotation body dimensions.
    """

    kind: Optional[PieceKind]
    body: Grid
    pivot: Pivot

    def rotated_clockwise(self) -> "Piece":
        pivot = Pivot(self.pivot.column, self.body.rows - 1 - self.pivot.row)
        return Piece(self.kind, self.body.rotate_clockwise(), pivot)

    def rotated_counter_clockwise(self) -> "Piece":
        pivot = Pivot(self.body.columns - 1 - self.pivot.column, self.pivot.row)
        return Piece(self.kind, self.body.rotate_counter_clockwise(), pivot)

    @property
    def is_empty(self) -> bool:
        return self.kind is None


# (body rows, pivot) per kind, in spawn orientation.
BASE_SHAPES: Dict[PieceKind, Tuple[Tuple[Tuple[int, ...], ...], Tuple[int, int]]] = {
    PieceKind.I: (((1,), (1,), (1,), (1,)), (1, 0)),
    PieceKind.J: (((0, 1), (0, 1), (1, 1)), (1, 1)),
    PieceKind.L: (((1, 0), (1, 0), (1, 1)), (1, 0)),
    PieceKind.O: (((1, 1), (1, 1)), (1, 1)),
    PieceKind.S: (((0, 1, 1), (1, 1, 0)), (1, 1)),
    PieceKind.T: (((1, 1, 1), (0, 1, 0)), (0, 1)),
    PieceKind.Z: (((1, 1, 0), (0, 1, 1)), (1, 1)),
}


def make_piece(kind: PieceKind) -> Piece:
    rows, (pivot_row, pivot_column) = BASE_SHAPES[PieceKind(kind)]
    return Piece(PieceKind(kind), Grid.from_rows(rows), Pivot(pivot_row, pivot_column))


def empty_piece() -> Piece:
    return Piece(None, Grid(1, 1), NO_PIVOT)


PieceSupply = Callable[[], Piece]


class RandomPieceSupply:
    """Uniform random piece source with its own generator.

    Deep copies carry an independent generator in the same state.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def __call__(self) -> Piece:
        return make_piece(self.rng.choice(list(PieceKind)))


class ScriptedPieceSupply:
    """Cycles through a fixed sequence of kinds."""

    def __init__(self, kinds: Sequence[PieceKind]) -> None:
        if not kinds:
            raise ValueError("ScriptedPieceSupply needs at least one kind")
        self.kinds = [PieceKind(k) for k in kinds]
        self.index = 0

    def __call__(self) -> Piece:
        kind = self.kinds[self.index % len(self.kinds)]
        self.index += 1
        return make_piece(kind)
