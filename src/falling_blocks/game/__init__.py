"""Game module for Falling Blocks.

Exports the core engine and supporting classes:
- Grid: boolean matrix with 90 degree rotations
- Pivot: board location / piece rotation anchor
- Piece, PieceKind: the seven tetromino values and their factory
- Board: cell labels, placement and row clearing
- Game: spawn / move / rotate / lock cycle
"""

from .grid import Grid
from .pivot import NO_PIVOT, Pivot
from .pieces import (
    Piece,
    PieceKind,
    PieceSupply,
    RandomPieceSupply,
    ScriptedPieceSupply,
    empty_piece,
    make_piece,
)
from .board import EMPTY, Board
from .rules import LINE_CLEAR_POINTS, gravity_interval, score_for_rows
from .core import Game, GameConfig, MoveDirection
from .exceptions import InvariantViolation

__all__ = [
    "Grid",
    "Pivot",
    "NO_PIVOT",
    "Piece",
    "PieceKind",
    "PieceSupply",
    "RandomPieceSupply",
    "ScriptedPieceSupply",
    "empty_piece",
    "make_piece",
    "EMPTY",
    "Board",
    "LINE_CLEAR_POINTS",
    "gravity_interval",
    "score_for_rows",
    "Game",
    "GameConfig",
    "MoveDirection",
    "InvariantViolation",
]
