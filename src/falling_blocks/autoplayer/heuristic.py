"""Hand-tuned board evaluation used to rank candidate placements.

score = -2.5 * sum of column heights
        + 8.0 * completed rows
        - 4.5 * holes
        + 4.2 * wall contact (side columns x1, bottom row x2)
        + 4.0 * touching neighbours (each occupied pair counted from both sides)
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from falling_blocks.game import Board


HEIGHT_WEIGHT = -2.5
COMPLETED_ROWS_WEIGHT = 8.0
HOLES_WEIGHT = -4.5
WALL_WEIGHT = 4.2
TOUCHING_WEIGHT = 4.0


@dataclass(frozen=True)
class BoardFeatures:
    sum_of_heights: float
    completed_rows: float
    number_of_holes: float
    wall_touched: float
    touching_pieces_score: float

    @property
    def score(self) -> float:
        return (
            self.sum_of_heights * HEIGHT_WEIGHT
            + self.completed_rows * COMPLETED_ROWS_WEIGHT
            + self.number_of_holes * HOLES_WEIGHT
            + self.wall_touched * WALL_WEIGHT
            + self.touching_pieces_score * TOUCHING_WEIGHT
        )


def board_features(board: Board) -> BoardFeatures:
    filled = board.occupancy()
    rows, columns = filled.shape

    # Height of the topmost occupied cell per column, 0 for empty columns
    has_block = filled.any(axis=0)
    first_row = filled.argmax(axis=0)
    heights = np.where(has_block, rows - first_row, 0)

    # Empty cells with any occupied cell above them in the same column
    covered = np.logical_or.accumulate(filled, axis=0)
    holes = np.count_nonzero(covered & ~filled)

    side_cells = np.count_nonzero(filled[:, 0])
    if columns > 1:
        side_cells += np.count_nonzero(filled[:, columns - 1])
    wall = side_cells + 2 * np.count_nonzero(filled[rows - 1, :])

    completed = np.count_nonzero(filled.all(axis=1))

    vertical_pairs = np.count_nonzero(filled[1:, :] & filled[:-1, :])
    horizontal_pairs = np.count_nonzero(filled[:, 1:] & filled[:, :-1])
    touching = 2 * (vertical_pairs + horizontal_pairs)

    return BoardFeatures(
        sum_of_heights=float(heights.sum()),
        completed_rows=float(completed),
        number_of_holes=float(holes),
        wall_touched=float(wall),
        touching_pieces_score=float(touching),
    )


def heuristic_score(board: Board) -> float:
    return board_features(board).score
