"""
Hitori puzzle state engine: cell model, legality checks, inference rules,
state-space search and puzzle generation.
"""

from hitori.cell import Cell, Color, coord_to_notation, format_cells, notation_to_coord, parse_coordinates
from hitori.errors import AlreadyColoredError, HitoriError, ImpossibleStateError
from hitori.grid import Grid
from hitori.generator import GeneratorConfig, HitoriPuzzle, generate_puzzle
from hitori.search import find_solution, next_step_options

__all__ = [
    "AlreadyColoredError",
    "Cell",
    "Color",
    "GeneratorConfig",
    "Grid",
    "HitoriError",
    "HitoriPuzzle",
    "ImpossibleStateError",
    "coord_to_notation",
    "find_solution",
    "format_cells",
    "generate_puzzle",
    "next_step_options",
    "notation_to_coord",
    "parse_coordinates",
]
