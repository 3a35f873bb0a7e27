"""Generate a random values file and start a simulation from it."""

from __future__ import annotations

import argparse
import os
import random
import subprocess
import sys
from pathlib import Path

from acequia.manager import DEFAULT_VALUES_FILE, RandomValues, RegionSpec

REGION_NAMES = ("North", "South", "East")
TIME_RANGE = (50, 120)
LEVEL_RANGE = (0.0, 100.0)
NEED_RANGE = (50.0, 100.0)
CAPACITY_RANGE = (100.0, 200.0)


def _truncated_uniform(rng: random.Random, bounds: tuple[float, float]) -> float:
    """A value drawn uniformly from [low, high) and truncated to a whole number."""
    low, high = bounds
    return float(int(low + (high - low) * rng.random()))


def generate_random_values(rng: random.Random | None = None) -> RandomValues:
    """Draw a time limit and whole-number values for each region."""
    rng = rng if rng is not None else random.Random()
    simulation_max = rng.randint(*TIME_RANGE)
    regions = tuple(
        RegionSpec(
            name,
            _truncated_uniform(rng, LEVEL_RANGE),
            _truncated_uniform(rng, NEED_RANGE),
            _truncated_uniform(rng, CAPACITY_RANGE),
        )
        for name in REGION_NAMES
    )
    return RandomValues(simulation_max, regions)


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(value)


def format_random_values(values: RandomValues) -> str:
    """The text of a values file."""
    lines = ["Max Simulation Time", str(values.simulation_max), "Random Values"]
    lines.extend(
        ",".join(
            [
                spec.name,
                _number(spec.water_level),
                _number(spec.water_need),
                _number(spec.water_capacity),
            ]
        )
        for spec in values.regions
    )
    return "\n".join(lines) + "\n"


def write_random_values(path: str | os.PathLike[str], values: RandomValues) -> None:
    """Write ``values`` to ``path``."""
    Path(path).write_text(format_random_values(values))


def _print_intro(values: RandomValues) -> None:
    print("Current State of the Regions: ")
    print("------------------------------")
    for spec in values.regions:
        print(
            f"Region: {spec.name}, Water Level: {_number(spec.water_level)}, "
            f"Water Need: {_number(spec.water_need)}, "
            f"Water Capacity: {_number(spec.water_capacity)}"
        )
    print("------------------------------------------------------------")
    print("Please write your solution in the acequia.solution module.")
    print(
        "Your code must solve each region's water needs within the following "
        f"simulation time: {values.simulation_max}"
    )
    print(
        "When you have saved your code and ready to run the simulation, "
        "you may press Y to run."
    )


def main(argv: list[str] | None = None) -> int:
    """Write a fresh values file, wait for the user, then run the simulation."""
    parser = argparse.ArgumentParser(
        description="Generate random region values and run the simulation."
    )
    parser.add_argument(
        "--output", default=DEFAULT_VALUES_FILE, help="values file to write"
    )
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    args = parser.parse_args(argv)

    values = generate_random_values(random.Random(args.seed))
    _print_intro(values)
    write_random_values(args.output, values)

    print("Press Y to test your solve_problems function.")
    try:
        input()
    except EOFError:
        pass
    # Any answer, or none, goes on to the simulation.
    command = [sys.executable, "-m", "acequia.simulator", "--values", str(args.output)]
    result = subprocess.run(command, check=False)
    if result.returncode != 0:
        print("execution failed!", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())