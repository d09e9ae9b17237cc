"""
Hitori State-Space Search.

Explicit-stack depth-first search over grid snapshots. Every branch owns its
own Grid clone, so a state pushed on the stack is never changed by its
siblings. Children are produced in row-major cell order and ascending value
order, which keeps seeded runs reproducible.
"""

import logging
from typing import TYPE_CHECKING, List, Optional

from hitori import rules
from hitori.errors import ImpossibleStateError
from hitori.inference import narrow_for_creation

if TYPE_CHECKING:
    from hitori.grid import Grid

logger = logging.getLogger(__name__)


def creation_options(grid: "Grid") -> List["Grid"]:
    """One child per (unassigned cell, possible value) pair."""
    options = []
    for cell in grid.unassigned_cells():
        for value in sorted(grid.possible_values(cell)):
            child = grid.clone()
            child.assign(child[cell.coords], value)
            options.append(child)
    return options


def find_solution(start: "Grid") -> Optional["Grid"]:
    """
    Number every unshaded cell of a shading pattern.

    Args:
        start: Grid whose black cells are fixed and whose other cells may be
            unassigned. It is not modified.

    Returns:
        A solved Grid with no unassigned unshaded cell, or None if the
        pattern admits no valid numbering.
    """
    stack = [start.clone()]
    visited = {stack[0].key()}
    explored = 0

    while stack:
        grid = stack.pop()
        explored += 1

        try:
            narrow_for_creation(grid)
        except ImpossibleStateError:
            continue

        if rules.is_solved(grid) and not grid.has_unassigned_cells():
            logger.debug(f"Found numbering after {explored} states")
            return grid

        for child in creation_options(grid):
            key = child.key()
            if key not in visited:
                visited.add(key)
                stack.append(child)

    logger.debug(f"Pattern exhausted after {explored} states, no numbering found")
    return None


def next_step_options(grid: "Grid") -> List["Grid"]:
    """
    Every legal grid obtained by shading one uncolored cell.

    Cells whose shading breaks adjacency or connectivity are skipped.
    """
    options = []
    for cell in grid.uncolored_cells():
        option = grid.clone()
        try:
            option.color_black(option[cell.coords])
        except ImpossibleStateError:
            continue
        options.append(option)
    return options
