"""
Hitori Grid (puzzle state).

The grid owns a flat, row-major list of N*N cells and is the only place that
knows about topology: neighbors, rows and columns are resolved by coordinate.

Grids compare and hash by content (size plus every cell's color and value),
which is what lets the search keep a visited set of explored states.

Hitori Rules:
1. NON-ADJACENCY: No two shaded cells may be orthogonally adjacent
2. CONNECTIVITY: All unshaded cells must form a single connected region
3. UNIQUENESS: Each number appears at most once per row/column (unshaded cells only)
"""

import math
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from hitori import inference, rules, search
from hitori.cell import Cell, Color
from hitori.errors import ImpossibleStateError

DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


class Grid:
    """An N x N Hitori board with per-cell coloring state."""

    def __init__(self, clues: Sequence[Sequence[Optional[int]]]):
        size = len(clues)
        if any(len(row) != size for row in clues):
            raise ValueError("clue array must be square")
        self.size = size
        self.cells: List[Cell] = [
            Cell(r, c, clues[r][c]) for r in range(size) for c in range(size)
        ]

    @classmethod
    def blank(cls, size: int) -> "Grid":
        """Create a grid of unassigned, uncolored cells."""
        return cls([[None] * size for _ in range(size)])

    def clone(self) -> "Grid":
        """Deep copy: the clone shares no cells with this grid."""
        grid = Grid.__new__(Grid)
        grid.size = self.size
        grid.cells = [cell.copy() for cell in self.cells]
        return grid

    # -------------------------------------------------------------------------
    # Topology
    # -------------------------------------------------------------------------

    def __getitem__(self, coords: Tuple[int, int]) -> Cell:
        row, col = coords
        return self.cells[row * self.size + col]

    def row(self, index: int) -> List[Cell]:
        start = index * self.size
        return self.cells[start:start + self.size]

    def column(self, index: int) -> List[Cell]:
        return self.cells[index::self.size]

    def rows(self) -> List[List[Cell]]:
        return [self.row(r) for r in range(self.size)]

    def columns(self) -> List[List[Cell]]:
        return [self.column(c) for c in range(self.size)]

    def lines(self) -> Iterator[List[Cell]]:
        """Every row, then every column."""
        yield from self.rows()
        yield from self.columns()

    def neighbors(self, cell: Cell) -> List[Cell]:
        """The up to four orthogonally adjacent cells."""
        result = []
        for dr, dc in DIRECTIONS:
            nr, nc = cell.row + dr, cell.col + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                result.append(self[nr, nc])
        return result

    # -------------------------------------------------------------------------
    # Cell selections
    # -------------------------------------------------------------------------

    def black_cells(self) -> List[Cell]:
        return [cell for cell in self.cells if cell.is_black]

    def non_black_cells(self) -> List[Cell]:
        return [cell for cell in self.cells if not cell.is_black]

    def uncolored_cells(self) -> List[Cell]:
        return [cell for cell in self.cells if cell.is_uncolored]

    def unassigned_cells(self) -> List[Cell]:
        """Non-black cells that still have no value."""
        return [cell for cell in self.cells if not cell.is_black and cell.value is None]

    def has_unassigned_cells(self) -> bool:
        return any(not cell.is_black and cell.value is None for cell in self.cells)

    def shaded(self) -> Set[Tuple[int, int]]:
        """Coordinates of the black cells."""
        return {cell.coords for cell in self.cells if cell.is_black}

    def values(self) -> List[List[Optional[int]]]:
        return [[cell.value for cell in row] for row in self.rows()]

    # -------------------------------------------------------------------------
    # Coloring state machine
    # -------------------------------------------------------------------------

    def color_black(self, cell: Cell) -> None:
        """
        Shade a cell and re-check adjacency and connectivity.

        Raises:
            AlreadyColoredError: if the cell is not uncolored
            ImpossibleStateError: if shading breaks a grid invariant; the cell
                is reverted to uncolored before the error propagates
        """
        cell.paint(Color.BLACK)
        if not rules.is_legal(self):
            cell.revert()
            raise ImpossibleStateError(
                f"shading ({cell.row}, {cell.col}) breaks adjacency or connectivity"
            )

    def color_white(self, cell: Cell) -> None:
        """Lock a cell as unshaded. Whitening never breaks an invariant."""
        cell.paint(Color.WHITE)

    def revert(self, cell: Cell) -> None:
        cell.revert()

    def revert_all(self) -> None:
        for cell in self.cells:
            cell.revert()

    def assign(self, cell: Cell, value: int) -> None:
        """Give a cell its number, committing it to white."""
        cell.value = value
        if not cell.is_white:
            self.color_white(cell)

    def possible_values(self, cell: Cell) -> Set[int]:
        """
        Values the cell can take without repeating a number held by another
        non-black cell of its row or column.
        """
        if cell.is_black:
            raise ValueError(f"possible values are undefined for black cell {cell.coords}")
        taken = {
            other.value
            for other in self.row(cell.row) + self.column(cell.col)
            if other is not cell and not other.is_black and other.value is not None
        }
        return set(range(1, self.size + 1)) - taken

    # -------------------------------------------------------------------------
    # Public puzzle operations
    # -------------------------------------------------------------------------

    def is_legal(self) -> bool:
        return rules.is_legal(self)

    def is_solved(self) -> bool:
        return rules.is_solved(self)

    def infer(self) -> None:
        """Apply the solving deductions in place until nothing changes."""
        inference.narrow_for_solving(self)

    def next_step_options(self) -> List["Grid"]:
        """Every legal grid reachable by shading one more cell."""
        return search.next_step_options(self)

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def key(self) -> Tuple:
        """Immutable snapshot of the grid content, usable as a set member."""
        return (self.size, tuple(cell.state() for cell in self.cells))

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __str__(self):
        width = int(math.log10(self.size) + 2) if self.size else 2
        separator = "\n" * max(1, math.ceil(math.log10(self.size))) if self.size else "\n"
        return separator.join(
            "".join(str(cell).rjust(width) for cell in row) for row in self.rows()
        )

    def __repr__(self):
        return f"Grid(size={self.size}, shaded={sorted(self.shaded())})"
