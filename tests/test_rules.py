from hitori import rules
from hitori.cell import Color
from hitori.grid import Grid


def test_fresh_grid_is_legal_but_may_repeat():
    grid = Grid([[1, 1], [2, 1]])
    assert rules.is_legal(grid)
    assert rules.has_row_repetition(grid)
    assert rules.has_column_repetition(grid)
    assert not rules.is_solved(grid)


def test_shading_the_duplicate_solves():
    grid = Grid([[1, 1], [2, 1]])
    grid.color_black(grid[0, 1])
    assert not rules.has_row_repetition(grid)
    assert not rules.has_column_repetition(grid)
    assert rules.is_solved(grid)


def test_adjacent_blacks_detected(latin_grid):
    # Bypass color_black, which refuses illegal states
    latin_grid[0, 0].color = latin_grid[0, 1].color = Color.BLACK
    assert rules.adjacent_blacks_in_rows(latin_grid)
    assert not rules.adjacent_blacks_in_columns(latin_grid)
    assert not rules.is_legal(latin_grid)


def test_is_connected_resets_visited_flags(latin_grid):
    latin_grid.color_black(latin_grid[1, 1])
    assert rules.is_connected(latin_grid)
    assert not any(cell.visited for cell in latin_grid.cells)


def test_disconnected_region(latin_grid):
    latin_grid.color_black(latin_grid[0, 1])
    latin_grid[1, 0].color = Color.BLACK
    assert not rules.is_connected(latin_grid)
    assert not any(cell.visited for cell in latin_grid.cells)


def test_all_black_grid_is_not_connected():
    grid = Grid([[1]])
    grid[0, 0].color = Color.BLACK
    assert not rules.is_connected(grid)


def test_unassigned_values_are_not_repetitions():
    assert not rules.has_row_repetition(Grid.blank(3))
    assert rules.is_solved(Grid.blank(3))


def test_find_violations_report():
    grid = Grid([[1, 1, 2], [2, 3, 1], [3, 2, 1]])
    report = rules.find_violations(grid)

    assert report["uniqueness"] == {"rows": [0], "cols": [2]}
    assert report["adjacency"] == []
    assert report["connectivity"] == {"connected": True, "total_unshaded": 9}
    assert not report["all_valid"]

    grid.color_black(grid[0, 1])
    grid.color_black(grid[2, 2])
    assert rules.find_violations(grid)["all_valid"]
