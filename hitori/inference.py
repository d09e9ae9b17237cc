"""
Hitori Inference Rules.

Deterministic deductions applied until a full pass changes nothing.

Creation-time rules fill in numbers for a fixed shading pattern; solving-time
rules shade or lock cells of a numbered puzzle. Every rule skips cells that
already hold the color it wants, so running a fixpoint twice is a no-op.
A rule that needs the opposite color on an already colored cell raises
ImpossibleStateError.
"""

from hitori.errors import AlreadyColoredError, ImpossibleStateError


def _make_white(grid, cell) -> bool:
    if cell.is_white:
        return False
    try:
        grid.color_white(cell)
    except AlreadyColoredError as e:
        raise ImpossibleStateError(f"cell {cell.coords} must be white but is black") from e
    return True


def _make_black(grid, cell) -> bool:
    if cell.is_black:
        return False
    try:
        grid.color_black(cell)
    except AlreadyColoredError as e:
        raise ImpossibleStateError(f"cell {cell.coords} must be black but is white") from e
    return True


# =============================================================================
# Creation Rules
# =============================================================================

def no_options_left(grid) -> None:
    """An unassigned cell with nothing left to hold is a dead end."""
    for cell in grid.unassigned_cells():
        if not grid.possible_values(cell):
            raise ImpossibleStateError(f"no value fits cell {cell.coords}")


def one_option_left(grid) -> bool:
    """Assign every unassigned cell that has a single possible value."""
    changed = False
    for cell in grid.unassigned_cells():
        options = grid.possible_values(cell)
        if len(options) != 1:
            continue
        try:
            grid.assign(cell, options.pop())
        except AlreadyColoredError as e:
            raise ImpossibleStateError(f"cell {cell.coords} cannot take its forced value") from e
        changed = True
    return changed


def narrow_for_creation(grid) -> None:
    """
    Run the creation rules to a fixpoint.

    Values are only ever added, so this converges in at most N*N passes.

    Raises:
        ImpossibleStateError: if some unassigned cell runs out of values
    """
    changed = True
    while changed:
        no_options_left(grid)
        changed = one_option_left(grid)


# =============================================================================
# Solving Rules
# =============================================================================

def surrounded_cell(grid) -> bool:
    """
    A cell with a single non-black neighbor reaches the rest of the grid only
    through it, so that neighbor stays white.
    """
    changed = False
    for cell in grid.cells:
        open_neighbors = [n for n in grid.neighbors(cell) if not n.is_black]
        if len(open_neighbors) == 1:
            changed |= _make_white(grid, open_neighbors[0])
    return changed


def xyx_pattern(grid) -> bool:
    """In X Y X, shading Y would force both Xs to stay unshaded."""
    changed = False
    for line in grid.lines():
        for j in range(len(line) - 2):
            value = line[j].value
            if value is not None and value == line[j + 2].value:
                changed |= _make_white(grid, line[j + 1])
    return changed


def xxyzx_pattern(grid) -> bool:
    """
    Two adjacent equal values cannot both be shaded, so one of them stays
    unshaded and every other copy of that value in the line is shaded.
    """
    changed = False
    for line in grid.lines():
        for j in range(len(line) - 1):
            first, second = line[j], line[j + 1]
            if first.value is None or first.value != second.value:
                continue
            for other in line:
                if other is first or other is second or other.value != first.value:
                    continue
                changed |= _make_black(grid, other)
    return changed


def shaded_neighbors(grid) -> bool:
    """Neighbors of a shaded cell are unshaded."""
    changed = False
    for cell in grid.black_cells():
        for neighbor in grid.neighbors(cell):
            if neighbor.is_uncolored:
                grid.color_white(neighbor)
                changed = True
    return changed


SOLVING_RULES = [surrounded_cell, xyx_pattern, xxyzx_pattern, shaded_neighbors]


def narrow_for_solving(grid) -> None:
    """
    Run the solving rules, in order, until a pass changes nothing.

    Raises:
        ImpossibleStateError: if a rule hits a contradiction
    """
    changed = True
    while changed:
        changed = False
        for rule in SOLVING_RULES:
            changed |= rule(grid)
