"""
Hitori Legality Checks.

Pure functions over a Grid. The only state they touch is the transient
`visited` flag of each cell, which `is_connected` resets before returning.

A grid is *legal* when it satisfies non-adjacency and connectivity, and
*solved* when it is legal and has no repeated number among the unshaded
cells of any row or column.
"""

from collections import deque
from typing import TYPE_CHECKING, Dict, List, Tuple

if TYPE_CHECKING:
    from hitori.grid import Grid


def adjacent_blacks_in_rows(grid: "Grid") -> bool:
    """True if two horizontally adjacent cells are both black."""
    return any(
        left.is_black and right.is_black
        for row in grid.rows()
        for left, right in zip(row, row[1:])
    )


def adjacent_blacks_in_columns(grid: "Grid") -> bool:
    """True if two vertically adjacent cells are both black."""
    return any(
        top.is_black and bottom.is_black
        for column in grid.columns()
        for top, bottom in zip(column, column[1:])
    )


def is_connected(grid: "Grid") -> bool:
    """
    Check that all non-black cells form a single connected region.
    Uses BFS from any non-black cell.

    A grid without non-black cells is not connected.
    """
    unshaded = grid.non_black_cells()
    if not unshaded:
        return False

    try:
        start = unshaded[0]
        start.visited = True
        queue = deque([start])
        reached = 0

        while queue:
            cell = queue.popleft()
            reached += 1
            for neighbor in grid.neighbors(cell):
                if not neighbor.is_black and not neighbor.visited:
                    neighbor.visited = True
                    queue.append(neighbor)

        return reached == len(unshaded)
    finally:
        for cell in grid.cells:
            cell.visited = False


def _has_repetition(line) -> bool:
    seen = set()
    for cell in line:
        if cell.is_black or cell.value is None:
            continue
        if cell.value in seen:
            return True
        seen.add(cell.value)
    return False


def has_row_repetition(grid: "Grid") -> bool:
    return any(_has_repetition(row) for row in grid.rows())


def has_column_repetition(grid: "Grid") -> bool:
    return any(_has_repetition(column) for column in grid.columns())


def is_legal(grid: "Grid") -> bool:
    return (
        not adjacent_blacks_in_rows(grid)
        and not adjacent_blacks_in_columns(grid)
        and is_connected(grid)
    )


def is_solved(grid: "Grid") -> bool:
    return is_legal(grid) and not has_row_repetition(grid) and not has_column_repetition(grid)


# =============================================================================
# Verification Report
# =============================================================================

def _adjacent_black_pairs(grid: "Grid") -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
    pairs = []
    for cell in grid.black_cells():
        r, c = cell.coords
        # Right and bottom neighbors only, so each pair is reported once
        if c + 1 < grid.size and grid[r, c + 1].is_black:
            pairs.append(((r, c), (r, c + 1)))
        if r + 1 < grid.size and grid[r + 1, c].is_black:
            pairs.append(((r, c), (r + 1, c)))
    return pairs


def find_violations(grid: "Grid") -> Dict:
    """
    Report every broken invariant of a grid.

    Returns:
        Dictionary with:
        - uniqueness: {"rows": [...], "cols": [...]} indices with repeated values
        - adjacency: list of adjacent black coordinate pairs
        - connectivity: {"connected": bool, "total_unshaded": int}
        - all_valid: bool
    """
    uniqueness = {
        "rows": [i for i, row in enumerate(grid.rows()) if _has_repetition(row)],
        "cols": [i for i, col in enumerate(grid.columns()) if _has_repetition(col)],
    }
    adjacency = _adjacent_black_pairs(grid)
    connected = is_connected(grid)

    all_valid = not uniqueness["rows"] and not uniqueness["cols"] and not adjacency and connected

    return {
        "uniqueness": uniqueness,
        "adjacency": adjacency,
        "connectivity": {
            "connected": connected,
            "total_unshaded": len(grid.non_black_cells()),
        },
        "all_valid": all_valid,
    }
