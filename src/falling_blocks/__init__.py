"""Falling Blocks: a falling-block puzzle engine with a search-based autoplayer."""

from .game import Board, Game, GameConfig, MoveDirection, Piece, PieceKind
from .autoplayer import Autoplayer, Command
from .session import PlaySession

__all__ = [
    "Board",
    "Game",
    "GameConfig",
    "MoveDirection",
    "Piece",
    "PieceKind",
    "Autoplayer",
    "Command",
    "PlaySession",
]
