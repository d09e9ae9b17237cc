"""
Hitori Engine Errors.

Both errors are routine during search: they mark dead branches, not bugs.
"""


class HitoriError(Exception):
    """Base class for puzzle state errors."""


class AlreadyColoredError(HitoriError):
    """Raised when coloring a cell that already carries Black or White."""

    def __init__(self, row: int, col: int, color):
        self.row = row
        self.col = col
        self.color = color
        super().__init__(f"cell ({row}, {col}) is already {color.value}")


class ImpossibleStateError(HitoriError):
    """Raised when a grid invariant or a deduction is violated."""
