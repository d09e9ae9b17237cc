"""
Hitori Puzzle Generator.

Generates Hitori puzzles of any size from scratch.

Algorithm:
1. Shade a random, legal pattern (respecting non-adjacency and connectivity)
2. Number the unshaded cells with the state-space search
3. Give shaded cells random decoy numbers
4. Erase all coloring, leaving a grid of bare numbers
5. Retry with a new pattern if the search finds no numbering
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Set, Tuple

from hitori.cell import format_cells
from hitori.errors import AlreadyColoredError, ImpossibleStateError
from hitori.grid import Grid
from hitori.search import find_solution

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 5
DEFAULT_MAX_ATTEMPTS = 10


@dataclass
class GeneratorConfig:
    """Settings for a generation run."""
    size: int = DEFAULT_SIZE
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: Optional[int] = None


@dataclass
class HitoriPuzzle:
    """A generated puzzle together with the shading it was built from."""
    puzzle: Grid
    solution: Grid
    attempts: int = 1

    def shaded(self) -> Set[Tuple[int, int]]:
        return self.solution.shaded()

    def format_solution(self) -> str:
        """Format solution as coordinate string."""
        return format_cells(self.shaded())


# =============================================================================
# Shading Generation
# =============================================================================

def create_black_pattern(grid: Grid, rng=random) -> Grid:
    """
    Greedily shade cells in random order, keeping each shading that leaves
    the grid legal. Every cell that ends up unshaded is reset to uncolored.
    """
    cells = grid.uncolored_cells()
    rng.shuffle(cells)

    for cell in cells:
        try:
            grid.color_black(cell)
        except (AlreadyColoredError, ImpossibleStateError):
            continue

    for cell in grid.non_black_cells():
        grid.revert(cell)

    return grid


# =============================================================================
# Obfuscation
# =============================================================================

def obfuscate(solution: Grid, rng=random) -> Grid:
    """
    Turn a numbered solution into a playable puzzle.

    Shaded cells of `solution` receive random decoy numbers in place. The
    returned copy has every cell uncolored.
    """
    for cell in solution.black_cells():
        cell.value = rng.randint(1, solution.size)

    puzzle = solution.clone()
    puzzle.revert_all()
    return puzzle


# =============================================================================
# Main Generation Function
# =============================================================================

def generate_puzzle(
    size: int = DEFAULT_SIZE,
    max_attempts: int = 1,
    rng=None
) -> Optional[HitoriPuzzle]:
    """
    Generate a complete Hitori puzzle.

    Args:
        size: Grid size
        max_attempts: Number of shading patterns to try before giving up
        rng: random.Random instance (defaults to the module-level generator)

    Returns:
        HitoriPuzzle object or None if generation failed
    """
    rng = rng or random

    for attempt in range(1, max_attempts + 1):
        pattern = create_black_pattern(Grid.blank(size), rng)
        logger.debug(f"Attempt {attempt}: shading {len(pattern.black_cells())} cells")

        solution = find_solution(pattern)
        if solution is None:
            logger.info(f"Attempt {attempt}/{max_attempts}: pattern has no valid numbering")
            continue

        puzzle = obfuscate(solution, rng)
        return HitoriPuzzle(puzzle=puzzle, solution=solution, attempts=attempt)

    logger.warning(f"Failed to generate a {size}x{size} puzzle in {max_attempts} attempts")
    return None


def generate_from_config(config: GeneratorConfig) -> Optional[HitoriPuzzle]:
    """Generate a puzzle with a dedicated, optionally seeded, random source."""
    rng = random.Random(config.seed)
    return generate_puzzle(size=config.size, max_attempts=config.max_attempts, rng=rng)
