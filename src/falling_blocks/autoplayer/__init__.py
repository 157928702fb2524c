"""Automatic player: candidate enumeration, heuristic scoring and a command stack."""

from .commands import Command
from .heuristic import BoardFeatures, board_features, heuristic_score
from .planner import Autoplayer, CandidateBoard

__all__ = [
    "Command",
    "BoardFeatures",
    "board_features",
    "heuristic_score",
    "Autoplayer",
    "CandidateBoard",
]
