"""Exceptions raised by the game engine."""


class InvariantViolation(RuntimeError):
    """An internally impossible state was reached (programming error)."""
    pass
