"""
Hitori Cell Model.

A cell carries its coordinates, its number and a coloring state:

    UNCOLORED -> BLACK | WHITE -> UNCOLORED (revert)

There is no direct BLACK <-> WHITE transition. Neighbors are not stored on
the cell; the owning Grid resolves them by coordinate.
"""

import re
import string
from enum import Enum
from typing import Iterable, Optional, Set, Tuple

from hitori.errors import AlreadyColoredError

COLUMNS = string.ascii_uppercase


class Color(Enum):
    UNCOLORED = "uncolored"
    BLACK = "black"
    WHITE = "white"


class Cell:
    """A single square of a Hitori grid."""

    __slots__ = ("row", "col", "value", "color", "visited")

    def __init__(self, row: int, col: int, value: Optional[int] = None,
                 color: Color = Color.UNCOLORED):
        self.row = row
        self.col = col
        self.value = value
        self.color = color
        # Flood-fill scratch flag, not part of the cell's identity
        self.visited = False

    @property
    def coords(self) -> Tuple[int, int]:
        return (self.row, self.col)

    @property
    def is_black(self) -> bool:
        return self.color is Color.BLACK

    @property
    def is_white(self) -> bool:
        return self.color is Color.WHITE

    @property
    def is_uncolored(self) -> bool:
        return self.color is Color.UNCOLORED

    @property
    def is_assigned(self) -> bool:
        return self.value is not None

    def paint(self, color: Color) -> None:
        """
        Move an uncolored cell to BLACK or WHITE.

        Raises:
            AlreadyColoredError: if the cell is not UNCOLORED
        """
        if self.color is not Color.UNCOLORED:
            raise AlreadyColoredError(self.row, self.col, self.color)
        self.color = color

    def revert(self) -> None:
        self.color = Color.UNCOLORED

    def copy(self) -> "Cell":
        return Cell(self.row, self.col, self.value, self.color)

    def state(self) -> Tuple[Color, Optional[int]]:
        return (self.color, self.value)

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return (self.coords, self.color, self.value) == (other.coords, other.color, other.value)

    def __hash__(self):
        return hash((self.coords, self.color, self.value))

    def __str__(self):
        if self.is_black:
            return "#"
        if self.value is None:
            return "."
        return str(self.value)

    def __repr__(self):
        return f"Cell({self.row}, {self.col}, value={self.value}, color={self.color.name})"


# =============================================================================
# Coordinate Notation
# =============================================================================

def coord_to_notation(row: int, col: int) -> str:
    """Convert (row, col) tuple to notation like 'A1', 'B3'."""
    return f"{COLUMNS[col]}{row + 1}"


def notation_to_coord(notation: str) -> Tuple[int, int]:
    """Convert notation like 'A1', 'B12' to (row, col) tuple."""
    notation = notation.strip().upper()
    col = COLUMNS.index(notation[0])
    row = int(notation[1:]) - 1
    return (row, col)


def parse_coordinates(text: str) -> Set[Tuple[int, int]]:
    """
    Parse coordinate notation from text.

    Accepts formats like "A1, B2, C3", "A1 B2 C3" or "A1,B2,C3".

    Returns set of (row, col) tuples.
    """
    return {notation_to_coord(match) for match in re.findall(r"[A-Za-z][1-9][0-9]*", text)}


def format_cells(coords: Iterable[Tuple[int, int]]) -> str:
    """Format a set of coordinates as a sorted 'A1, C2' string."""
    return ", ".join(coord_to_notation(r, c) for r, c in sorted(coords))
