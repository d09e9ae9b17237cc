import pytest

from hitori.cell import Cell, Color, coord_to_notation, format_cells, notation_to_coord, parse_coordinates
from hitori.errors import AlreadyColoredError


@pytest.mark.parametrize("color", [Color.BLACK, Color.WHITE])
def test_paint_then_revert_restores_cell(color):
    cell = Cell(1, 2, 4)
    before = cell.copy()

    cell.paint(color)
    assert cell.color is color
    cell.revert()

    assert cell == before
    assert cell.state() == (Color.UNCOLORED, 4)


def test_no_direct_black_white_transition():
    cell = Cell(0, 0, 1)
    cell.paint(Color.BLACK)

    with pytest.raises(AlreadyColoredError):
        cell.paint(Color.WHITE)
    assert cell.is_black

    cell.revert()
    cell.paint(Color.WHITE)
    assert cell.is_white


def test_visited_flag_is_not_part_of_equality():
    a = Cell(0, 0, 3)
    b = Cell(0, 0, 3)
    a.visited = True
    assert a == b
    assert hash(a) == hash(b)


def test_cell_rendering():
    assert str(Cell(0, 0, 7)) == "7"
    assert str(Cell(0, 0)) == "."
    assert str(Cell(0, 0, 7, Color.BLACK)) == "#"


def test_coordinate_notation():
    assert coord_to_notation(0, 0) == "A1"
    assert coord_to_notation(11, 2) == "C12"
    assert notation_to_coord("c12") == (11, 2)
    assert parse_coordinates("A1, B2 C3,D10") == {(0, 0), (1, 1), (2, 2), (9, 3)}
    assert format_cells({(1, 1), (0, 2)}) == "C1, B2"
