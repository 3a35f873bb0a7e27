"""Regions, water sources and canals of the acequia simulation."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass, field
from functools import reduce
from itertools import repeat

# Flow is measured per second; dividing by this keeps hourly changes readable.
FLOW_DIVISOR = 1000.0
DROUGHT_FRACTION = 0.2


class WaterSourceType(enum.Enum):
    """Kind of a water source."""

    RIVER = "river"
    UNDERGROUND = "underground"
    DAM = "dam"


@dataclass(eq=False)
class WaterSource:
    """A river, aquifer or dam that supplies one or more regions."""

    name: str
    type: WaterSourceType
    water_level: float

    def update_water_level(self, change: float) -> None:
        """Add ``change`` (which may be negative) to the water level."""
        self.water_level += change


@dataclass(eq=False)
class Region:
    """A region with a water level, a need and a capacity."""

    name: str
    water_level: float
    water_need: float
    water_capacity: float
    is_flooded: bool = False
    is_in_drought: bool = False
    overflow: int = 0
    drought: int = 0
    supplied_water: list[WaterSource] = field(default_factory=list)

    def update_water_level(self, change: float) -> None:
        """Apply a change to the water level and refresh the flood and drought flags."""
        self.water_level += change
        level = self.water_level
        capacity = self.water_capacity
        if level >= capacity:
            self.water_level = capacity
            self.is_flooded = True
            self.is_in_drought = False
            self.overflow += 1
        elif capacity > level > self.water_need:
            self.is_flooded = False
            self.is_in_drought = False
        elif level >= DROUGHT_FRACTION * capacity:
            self.is_flooded = False
            self.is_in_drought = False
        elif level <= DROUGHT_FRACTION * capacity:
            self.is_in_drought = True
            self.is_flooded = False
            self.drought += 1
        if self.water_level < 0:
            self.water_level = 0.0
            self.is_in_drought = True
            self.is_flooded = False

    def add_water_source(self, source: WaterSource) -> None:
        """Record that ``source`` supplies this region."""
        self.supplied_water.append(source)


@dataclass(eq=False)
class Canal:
    """A canal that carries water from one region to another while open."""

    name: str
    source_region: Region
    destination_region: Region
    water_source: WaterSource
    flow_rate: float = 0.0
    is_open: bool = False

    def update_water(self, seconds: int) -> None:
        """Move water for ``seconds`` seconds at the current flow rate, if open."""
        if not self.is_open:
            return
        # Accumulated second by second so the rounding matches a running total.
        change = reduce(operator.add, repeat(self.flow_rate, max(seconds, 0)), 0.0)
        amount = change / FLOW_DIVISOR
        self.source_region.update_water_level(-amount)
        self.destination_region.update_water_level(amount)