"""The simulation manager: set-up, hourly stepping, scoring and reports."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from acequia.model import Canal, Region, WaterSource, WaterSourceType

DEFAULT_VALUES_FILE = "RandomValues.dat"
SECONDS_PER_HOUR = 3600
REGION_SCORE = 10.0
SOLVED_BONUS = 50.0
SCORE_KEY = "StudentSolution"


@dataclass(frozen=True)
class RegionSpec:
    """Initial values of one region."""

    name: str
    water_level: float
    water_need: float
    water_capacity: float


@dataclass(frozen=True)
class RandomValues:
    """Contents of a values file: the time limit and the regions."""

    simulation_max: int
    regions: tuple[RegionSpec, ...]


def _leading_int(text: str) -> int:
    """Parse the leading integer of ``text``, ignoring whatever follows it."""
    stripped = text.lstrip()
    end = 0
    if stripped[:1] in ("+", "-"):
        end = 1
    digits_start = end
    while end < len(stripped) and stripped[end].isdigit():
        end += 1
    if end == digits_start:
        raise ValueError(f"no integer in {text!r}")
    return int(stripped[:end])


def parse_random_values(text: str) -> RandomValues:
    """Parse a values file: a header, the time limit, a header, then region lines."""
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("values file has no simulation time")
    simulation_max = _leading_int(lines[1])
    specs = []
    for line in lines[3:]:
        if not line:
            continue
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"region line needs four fields: {line!r}")
        name, level, need, capacity = fields[:4]
        specs.append(
            RegionSpec(
                name,
                float(_leading_int(level)),
                float(_leading_int(need)),
                float(_leading_int(capacity)),
            )
        )
    return RandomValues(simulation_max, tuple(specs))


def read_random_values(path: str | os.PathLike[str]) -> RandomValues:
    """Read and parse a values file."""
    return parse_random_values(Path(path).read_text())


class AcequiaManager:
    """Holds the regions, water sources and canals and runs the simulation."""

    def __init__(self) -> None:
        self.regions: list[Region] = []
        self.water_sources: list[WaterSource] = []
        self.canals: list[Canal] = []
        self.leaderboard: dict[str, float] = {}
        self.solved_time = 0
        self.hour = 0
        self.simulation_max = 0
        self.is_solved = False

    def initialize_random_parameters(
        self, path: str | os.PathLike[str] = DEFAULT_VALUES_FILE
    ) -> None:
        """Set up regions from ``path``, then sources, canals, flags and time."""
        self.initialize_regions(path)
        self.initialize_water_sources()
        self.initialize_canals()
        self.initialize_constraints()
        self.initialize_time()

    def initialize_time(self) -> None:
        """Reset the clock and the solved state."""
        self.hour = 0
        self.solved_time = 0
        self.is_solved = False

    def initialize_regions(self, path: str | os.PathLike[str] = DEFAULT_VALUES_FILE) -> None:
        """Read the time limit and the regions from a values file."""
        values = read_random_values(path)
        self.simulation_max = values.simulation_max
        self.regions.extend(
            Region(spec.name, spec.water_level, spec.water_need, spec.water_capacity)
            for spec in values.regions
        )

    def _require_regions(self, count: int) -> None:
        if len(self.regions) < count:
            raise ValueError(
                f"at least {count} regions are needed, found {len(self.regions)}"
            )

    def initialize_water_sources(self) -> None:
        """Create the water sources and connect them to the first three regions."""
        self._require_regions(3)
        rio_grande = WaterSource("Rio Grande", WaterSourceType.RIVER, 100.0)
        aquifer = WaterSource("ABQ Underground Aquifer", WaterSourceType.UNDERGROUND, 200.0)
        butte = WaterSource("Elephant Butte Dam", WaterSourceType.DAM, 150.0)
        pecos = WaterSource("Pecos", WaterSourceType.RIVER, 80.0)
        self.water_sources.extend([rio_grande, aquifer, butte, pecos])

        north, south, east = self.regions[:3]
        north.add_water_source(rio_grande)
        south.add_water_source(rio_grande)
        north.add_water_source(aquifer)
        south.add_water_source(butte)
        north.add_water_source(pecos)
        east.add_water_source(pecos)

    def initialize_canals(self) -> None:
        """Create the four canals between the first three regions."""
        self._require_regions(3)
        if len(self.water_sources) < 4:
            raise ValueError("water sources must be initialized before canals")
        first, second, third = self.regions[:3]
        sources = self.water_sources
        self.canals.extend(
            [
                Canal("Canal A", first, second, sources[0]),
                Canal("Canal B", second, third, sources[2]),
                Canal("Canal C", first, third, sources[3]),
                Canal("Canal D", third, first, sources[2]),
            ]
        )

    def initialize_constraints(self) -> None:
        """Set each region's flags from its level and clear its counters."""
        for region in self.regions:
            region.update_water_level(0)
            region.overflow = 0
            region.drought = 0

    def next_hour(self) -> None:
        """Run every open canal for an hour, check for a solution, and advance the clock."""
        for canal in self.canals:
            if canal.is_open:
                canal.update_water(SECONDS_PER_HOUR)
        self.is_solved = self.solved()
        if self.is_solved:
            self.solved_time = self.hour
        self.hour += 1

    def solved(self) -> bool:
        """Whether every region is neither flooded nor in drought and above its need."""
        return all(
            not region.is_flooded
            and not region.is_in_drought
            and region.water_level > region.water_need
            for region in self.regions
        )

    def penalties(self) -> int:
        """Total count of overflow and drought events over all regions."""
        return sum(region.overflow + region.drought for region in self.regions)

    def format_state(self) -> str:
        """The current state of every region as text."""
        lines = ["Current State: ", "-----------------"]
        lines.extend(
            f"Region: {region.name}, Water Level: {region.water_level:g}, "
            f"Water Need: {region.water_need:g}, "
            f"Flooded: {'Yes' if region.is_flooded else 'No'}, "
            f"Drought: {'Yes' if region.is_in_drought else 'No'}"
            for region in self.regions
        )
        lines.append("------------------")
        return "\n".join(lines) + "\n"

    def display_state(self, file: TextIO | None = None) -> None:
        """Write the current state to ``file`` (standard output by default)."""
        out = file if file is not None else sys.stdout
        out.write(self.format_state())

    def evaluate_solution(self, file: TextIO | None = None) -> float:
        """Score the final state, record it on the leaderboard and return it."""
        out = file if file is not None else sys.stdout
        score = sum(
            REGION_SCORE
            for region in self.regions
            if not region.is_flooded
            and not region.is_in_drought
            and region.water_level >= region.water_need
        )
        score -= self.penalties()
        if self.is_solved:
            score += SOLVED_BONUS
            print(f"Time solved = {self.solved_time}", file=out)
        else:
            print("Not all regions were solved in time.", file=out)
        self.leaderboard[SCORE_KEY] = score
        print("--------------------\n", file=out)
        return score

    def display_leaderboard(self, file: TextIO | None = None) -> None:
        """Write the leaderboard, sorted by name."""
        out = file if file is not None else sys.stdout
        out.write("----------------\nLeaderboard: \n")
        for name, score in sorted(self.leaderboard.items()):
            out.write(f"{name}:{score:g}\n")