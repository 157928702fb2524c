from __future__ import annotations

from enum import IntEnum


class Command(IntEnum):
    DOWN = 0
    LEFT = 1
    RIGHT = 2
    ROTATE_CLOCKWISE = 3
