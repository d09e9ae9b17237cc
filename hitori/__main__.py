"""
Hitori command line.

Usage:
    # Generate a 5x5 puzzle
    python -m hitori generate --size 5 --seed 42

    # Run the deductions on a puzzle, one comma-separated row per argument
    python -m hitori infer 2,9,2 1,2,3 3,1,2
"""

import argparse
import logging
import sys
from typing import List, Optional

from hitori import rules
from hitori.cell import format_cells
from hitori.errors import ImpossibleStateError
from hitori.generator import DEFAULT_MAX_ATTEMPTS, DEFAULT_SIZE, GeneratorConfig, generate_from_config
from hitori.grid import Grid

logger = logging.getLogger("hitori")


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_rows(rows: List[str]) -> List[List[int]]:
    """Parse rows like '2,9,2' into a clue array."""
    return [[int(value) for value in row.split(",") if value.strip()] for row in rows]


def cmd_generate(args: argparse.Namespace) -> int:
    config = GeneratorConfig(size=args.size, max_attempts=args.max_attempts, seed=args.seed)
    puzzle = generate_from_config(config)
    if puzzle is None:
        logger.error(f"No puzzle found in {config.max_attempts} attempts")
        return 1

    logger.info(f"Generated {config.size}x{config.size} puzzle in {puzzle.attempts} attempt(s)")
    print(puzzle.puzzle)
    if args.show_solution:
        print()
        print(puzzle.solution)
        print(f"\nSolution: {puzzle.format_solution()}")
    return 0


def cmd_infer(args: argparse.Namespace) -> int:
    try:
        grid = Grid(parse_rows(args.rows))
    except ValueError as e:
        logger.error(f"Invalid puzzle: {e}")
        return 2

    try:
        grid.infer()
    except ImpossibleStateError as e:
        logger.error(f"Puzzle is contradictory: {e}")
        return 1

    print(grid)
    print(f"\nShaded: {format_cells(grid.shaded())}")
    print(f"White: {format_cells(c.coords for c in grid.cells if c.is_white)}")
    print(f"Solved: {grid.is_solved()}")
    print(f"Next-step options: {len(grid.next_step_options())}")

    violations = rules.find_violations(grid)
    if not violations["all_valid"]:
        logger.debug(f"Open constraints: {violations}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hitori", description="Hitori puzzle generator and inference engine")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a new puzzle")
    generate.add_argument("--size", type=int, default=DEFAULT_SIZE,
                          help="Grid size")
    generate.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS,
                          help="Shading patterns to try before giving up")
    generate.add_argument("--seed", type=int, default=None,
                          help="Random seed for reproducibility")
    generate.add_argument("--show-solution", action="store_true",
                          help="Also print the shading")
    generate.set_defaults(func=cmd_generate)

    infer = subparsers.add_parser("infer", help="Apply the deduction rules to a puzzle")
    infer.add_argument("rows", nargs="+", help="Puzzle rows as comma-separated numbers")
    infer.set_defaults(func=cmd_infer)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
