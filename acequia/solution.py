"""Strategies that drive the canals until every region is satisfied."""

from __future__ import annotations

from acequia.manager import AcequiaManager
from acequia.model import Canal

# The adaptive strategy gives up after this many simulated hours.
HOUR_LIMIT = 101


def _flow_for_deficit(deficit: float) -> float:
    """Flow rate to use for a destination that is ``deficit`` below its need."""
    if deficit > 20:
        return 0.9
    if deficit > 10:
        return 0.6
    return 0.3


def _open(canal: Canal, rate: float) -> None:
    canal.flow_rate = rate
    canal.is_open = True


def solve_problems(manager: AcequiaManager) -> None:
    """Each hour, open every canal whose destination is short of water.

    A canal is opened, with a flow rate chosen from the destination's deficit,
    when its destination is not flooded and below its need; otherwise it is
    closed. Runs until the simulation is solved or the hour limit is reached.
    """
    canals = manager.canals
    while not manager.is_solved and manager.hour < HOUR_LIMIT:
        for canal in canals:
            destination = canal.destination_region
            deficit = destination.water_need - destination.water_level
            if not destination.is_flooded and deficit > 0:
                _open(canal, _flow_for_deficit(deficit))
            else:
                canal.is_open = False
        manager.next_hour()


def solve_problems_scripted(manager: AcequiaManager) -> None:
    """A fixed schedule: open the first two canals early and close them at hour 82.

    Runs until the simulation is solved or its time limit is reached.
    """
    canals = manager.canals
    while not manager.is_solved and manager.hour != manager.simulation_max:
        if manager.hour == 0:
            _open(canals[0], 1.0)
        elif manager.hour == 1:
            _open(canals[1], 0.5)
        elif manager.hour == 82:
            canals[0].is_open = False
            canals[1].is_open = False
        manager.next_hour()