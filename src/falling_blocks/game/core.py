from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

import numpy as np

from .board import Board
from .pieces import Piece, PieceSupply, RandomPieceSupply, empty_piece
from .pivot import NO_PIVOT, Pivot
from .rules import score_for_rows


class MoveDirection(IntEnum):
    DOWN = 0
    LEFT = 1
    RIGHT = 2


@dataclass
class GameConfig:
    rows: int = 20
    columns: int = 11
    random_seed: Optional[int] = None


class Game:
    """One active piece, one preview piece and the board they live on.

    The active piece is always written into the board; moving or rotating
    it means removing it, then placing the moved copy, then restoring the
    original if that placement is rejected.
    """

    def __init__(self, board: Board, supply: Optional[PieceSupply] = None) -> None:
        self.board = board
        self.supply: PieceSupply = supply if supply is not None else RandomPieceSupply()
        self.lines_cleared = 0
        self.score = 0
        self.pieces_locked = 0
        self.spawn_anchor = Pivot(2, board.columns // 2)
        self.active_piece: Piece = empty_piece()
        self.preview_piece: Piece = empty_piece()
        self.active_position: Pivot = NO_PIVOT
        self.piece_has_locked = False

    @classmethod
    def from_config(cls, config: Optional[GameConfig] = None) -> "Game":
        config = config or GameConfig()
        return cls(Board(config.rows, config.columns), RandomPieceSupply(config.random_seed))

    def clone(self) -> "Game":
        return copy.deepcopy(self)

    def is_game_over(self) -> bool:
        # Only a lock followed by a blocked spawn ends the game.
        if not self.piece_has_locked:
            return False
        anchor = self.spawn_anchor
        return not self.board.can_place(self.active_piece, anchor.row, anchor.column)

    def _spawn_after_lock(self) -> bool:
        cleared = self.board.clear_completed_rows()
        self.lines_cleared += cleared
        self.score += score_for_rows(cleared)

        anchor = self.spawn_anchor
        if self.board.place(self.active_piece, anchor.row, anchor.column):
            self.active_position = anchor
            self.piece_has_locked = False
            return True
        self.active_position = NO_PIVOT
        return False

    def _replace(self, piece: Piece, position: Pivot) -> None:
        self.board.place(piece, position.row, position.column)

    def move_in_direction(self, direction: MoveDirection) -> bool:
        position = self.active_position
        if not self.board.remove(self.active_piece, position.row, position.column):
            return False

        if direction == MoveDirection.DOWN:
            if position.row >= self.board.rows - 1:
                self._replace(self.active_piece, position)
                return False
            target = position.shifted(1, 0)
        elif direction == MoveDirection.LEFT:
            if position.column <= 0:
                self._replace(self.active_piece, position)
                return False
            target = position.shifted(0, -1)
        else:
            if position.column >= self.board.columns - 1:
                self._replace(self.active_piece, position)
                return False
            target = position.shifted(0, 1)

        if self.board.place(self.active_piece, target.row, target.column):
            self.active_position = target
            return True
        self._replace(self.active_piece, position)
        return False

    def _rotate(self, rotated: Piece) -> bool:
        position = self.active_position
        if not self.board.remove(self.active_piece, position.row, position.column):
            return False
        if self.board.place(rotated, position.row, position.column):
            self.active_piece = rotated
            return True
        self._replace(self.active_piece, position)
        return False

    def rotate_clockwise(self) -> bool:
        return self._rotate(self.active_piece.rotated_clockwise())

    def rotate_counter_clockwise(self) -> bool:
        return self._rotate(self.active_piece.rotated_counter_clockwise())

    def step(self, direction: MoveDirection) -> bool:
        """Advance one logical step. Returns True when a new piece spawned."""
        if self.is_game_over():
            return False

        if self.active_piece.is_empty:
            self.active_piece = self.supply()
            self.preview_piece = self.supply()

        if direction == MoveDirection.DOWN:
            if not self.move_in_direction(direction):
                if not self.active_position.is_none:
                    self.pieces_locked += 1
                self.piece_has_locked = True
                self.active_piece = self.preview_piece
                self.preview_piece = self.supply()
                self._spawn_after_lock()
                return True
        else:
            self.move_in_direction(direction)
        return False

    def get_state(self) -> np.ndarray:
        return self.board.as_array()

    def get_game_stats(self) -> dict:
        return {
            "lines_cleared": self.lines_cleared,
            "score": self.score,
            "pieces_locked": self.pieces_locked,
            "game_over": self.is_game_over(),
            "filled_cells": self.board.filled_count(),
        }
