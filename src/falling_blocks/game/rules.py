from __future__ import annotations

from typing import Tuple

from .exceptions import InvariantViolation


# Points per lock, indexed by the number of rows it cleared.
LINE_CLEAR_POINTS: Tuple[int, int, int, int, int] = (0, 100, 300, 500, 1000)

# (cleared rows upper bound, seconds between gravity steps)
GRAVITY_TABLE: Tuple[Tuple[int, float], ...] = (
    (10, 0.8),
    (20, 0.72),
    (30, 0.63),
    (40, 0.55),
    (50, 0.47),
    (60, 0.38),
    (70, 0.3),
    (80, 0.22),
    (90, 0.13),
    (100, 0.1),
    (130, 0.08),
    (160, 0.07),
    (190, 0.05),
    (290, 0.03),
)
FINAL_GRAVITY_INTERVAL = 0.02


def score_for_rows(rows: int) -> int:
    # A single piece spans at most four rows.
    if not 0 <= rows < len(LINE_CLEAR_POINTS):
        raise InvariantViolation(f"{rows} rows cleared by a single lock")
    return LINE_CLEAR_POINTS[rows]


def gravity_interval(lines_cleared: int) -> float:
    """Seconds between automatic downward steps for a cleared-row total."""
    for bound, seconds in GRAVITY_TABLE:
        if lines_cleared < bound:
            return seconds
    return FINAL_GRAVITY_INTERVAL
