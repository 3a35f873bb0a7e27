"""Run one simulation: set up, apply a strategy, then report and score."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable
from typing import TextIO

from acequia.manager import DEFAULT_VALUES_FILE, AcequiaManager
from acequia.solution import solve_problems, solve_problems_scripted

Solver = Callable[[AcequiaManager], None]

SOLVERS: dict[str, Solver] = {
    "adaptive": solve_problems,
    "scripted": solve_problems_scripted,
}


def run_simulation(
    path: str | os.PathLike[str] = DEFAULT_VALUES_FILE,
    solver: Solver = solve_problems,
    file: TextIO | None = None,
) -> AcequiaManager:
    """Set up from ``path``, let ``solver`` drive it, then report the result."""
    manager = AcequiaManager()
    manager.initialize_random_parameters(path)
    solver(manager)
    manager.display_state(file)
    manager.evaluate_solution(file)
    manager.display_leaderboard(file)
    return manager


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Run the acequia simulation.")
    parser.add_argument(
        "--values",
        default=DEFAULT_VALUES_FILE,
        help="file with the time limit and region values",
    )
    parser.add_argument(
        "--solver",
        choices=sorted(SOLVERS),
        default="adaptive",
        help="strategy that operates the canals",
    )
    args = parser.parse_args(argv)
    try:
        run_simulation(args.values, SOLVERS[args.solver])
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())