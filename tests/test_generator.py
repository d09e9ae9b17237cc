import random

import pytest

from hitori import generator, rules
from hitori.cell import Color
from hitori.generator import GeneratorConfig, create_black_pattern, generate_from_config, generate_puzzle, obfuscate
from hitori.grid import Grid
from hitori.inference import narrow_for_solving


@pytest.mark.parametrize("size", [2, 3, 4])
@pytest.mark.parametrize("seed", range(4))
def test_black_pattern_is_legal_and_maximal(size, seed):
    grid = create_black_pattern(Grid.blank(size), random.Random(seed))

    assert grid.is_legal()
    assert grid.black_cells()
    assert all(cell.is_uncolored for cell in grid.non_black_cells())
    # no further cell can be shaded
    assert grid.next_step_options() == []


def test_single_cell_pattern_stays_open():
    grid = create_black_pattern(Grid.blank(1), random.Random(0))
    assert grid.shaded() == set()


@pytest.mark.parametrize("size", [1, 2, 3, 4])
@pytest.mark.parametrize("seed", range(4))
def test_generated_solution_satisfies_all_rules(size, seed):
    result = generate_puzzle(size, max_attempts=3, rng=random.Random(seed))

    assert result is not None
    solution = result.solution
    assert solution.is_solved()
    assert not solution.has_unassigned_cells()
    report = rules.find_violations(solution)
    assert report["all_valid"]


@pytest.mark.parametrize("size", [2, 3, 4])
def test_obfuscation_erases_colors(size):
    result = generate_puzzle(size, rng=random.Random(size))

    assert result is not None
    puzzle = result.puzzle
    assert all(cell.color is Color.UNCOLORED for cell in puzzle.cells)
    assert all(cell.value is not None and 1 <= cell.value <= size for cell in puzzle.cells)
    assert puzzle.values() == result.solution.values()
    assert result.shaded() == result.solution.shaded()


@pytest.mark.parametrize("seed", range(4))
def test_inference_agrees_with_generated_shading(seed):
    result = generate_puzzle(4, rng=random.Random(seed))
    grid = result.puzzle.clone()
    narrow_for_solving(grid)

    assert grid.shaded() <= result.shaded()
    whites = {cell.coords for cell in grid.cells if cell.is_white}
    assert not whites & result.shaded()


def test_obfuscate_gives_black_cells_decoys(rng):
    solution = Grid.blank(3)
    solution.color_black(solution[0, 0])
    solution = generator.find_solution(solution)
    puzzle = obfuscate(solution, rng)

    assert 1 <= solution[0, 0].value <= 3
    assert puzzle[0, 0].value == solution[0, 0].value
    assert puzzle[0, 0].is_uncolored
    assert solution[0, 0].is_black


def test_same_seed_same_puzzle():
    first = generate_from_config(GeneratorConfig(size=4, max_attempts=2, seed=7))
    second = generate_from_config(GeneratorConfig(size=4, max_attempts=2, seed=7))

    assert first.puzzle == second.puzzle
    assert first.shaded() == second.shaded()


def test_format_solution_uses_notation():
    result = generate_puzzle(3, rng=random.Random(3))
    formatted = result.format_solution()

    assert formatted
    assert all(len(item) == 2 for item in formatted.split(", "))


def test_retry_policy_is_bounded(monkeypatch, rng):
    calls = []

    def no_numbering(start):
        calls.append(start)
        return None

    monkeypatch.setattr(generator, "find_solution", no_numbering)

    assert generate_puzzle(3, max_attempts=4, rng=rng) is None
    assert len(calls) == 4


def test_zero_attempts_generates_nothing(rng):
    assert generate_puzzle(3, max_attempts=0, rng=rng) is None


def test_attempts_are_reported(monkeypatch, rng):
    real = generator.find_solution
    calls = []

    def fail_first(start):
        calls.append(start)
        return None if len(calls) == 1 else real(start)

    monkeypatch.setattr(generator, "find_solution", fail_first)
    result = generate_puzzle(3, max_attempts=3, rng=rng)

    assert result is not None
    assert result.attempts == 2
