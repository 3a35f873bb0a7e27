# acequia

A small water-management simulation. Three regions (North, South and
East in generated scenarios) each have a water level, a need and a
capacity. Four canals connect them, and a solver decides each hour which
canals are open and at what flow rate. A region is flooded when its level
reaches its capacity and in drought when its level falls to a fifth of
its capacity or below.

After the run the manager scores the result:

- 10 points for each region that is neither flooded nor in drought and
  holds at least the water it needs;
- minus one point for every update that left a region overflowing or in
  drought;
- 50 bonus points if every region was solved before time ran out.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Command line

### `acequia-generate`

Draws a random scenario, prints the starting state of each region and the
time limit, and writes the scenario to `RandomValues.dat`. It then waits
for a line on standard input (any answer, or end of input, continues) and
runs `acequia.simulator` on the file it wrote. It exits with status 1 if
that run fails.

```
acequia-generate [--output FILE] [--seed N]
```

- `--output FILE` — values file to write (default `RandomValues.dat`).
- `--seed N` — seed for the random generator, for repeatable scenarios.

### `acequia-simulate`

Runs one simulation from a values file and prints the final state of each
region, the time at which it was solved (or that it was not solved in
time), and the leaderboard. It exits with status 1 and prints an error if
the file cannot be read or parsed.

```
acequia-simulate [--values FILE] [--solver {adaptive,scripted}]
```

- `--values FILE` — values file to read (default `RandomValues.dat`).
- `--solver` — `adaptive` (the default, `acequia.solution.solve_problems`)
  or `scripted` (`acequia.solution.solve_problems_scripted`).

The same command is available as `python -m acequia.simulator`.

## Values file

```
Max Simulation Time
87
Random Values
North,42,63,150
South,12,71,188
East,90,55,133
```

The second line is the time limit in hours. Each line after the third is
`name,level,need,capacity`; the leading integer of each number is used.
At least three regions are needed.

## Library use

```python
from acequia.manager import AcequiaManager
from acequia.solution import solve_problems

manager = AcequiaManager()
manager.initialize_random_parameters("RandomValues.dat")
solve_problems(manager)
manager.display_state()
score = manager.evaluate_solution()
manager.display_leaderboard()
```

`display_state`, `evaluate_solution` and `display_leaderboard` take an
optional `file` to write to instead of standard output; `format_state()`
returns the state as a string. `evaluate_solution` returns the score and
records it on `manager.leaderboard` under `StudentSolution`.

`acequia.simulator.run_simulation(path, solver, file)` performs those steps
with any solver that takes the manager as its only argument, and returns
the manager.

A solver works on `manager.canals` (each an `acequia.model.Canal` with
`source_region`, `destination_region`, `flow_rate` and `is_open`) and calls
`manager.next_hour()` to advance the clock. `manager.hour`,
`manager.simulation_max` and `manager.is_solved` tell it when to stop.

- `solve_problems` opens each canal whose destination is below its need
  and not flooded, with a flow rate of 0.9, 0.6 or 0.3 depending on the
  shortfall, and closes the others; it stops when solved or after 101 hours.
- `solve_problems_scripted` follows a fixed timetable: it opens Canal A at
  hour 0, Canal B at hour 1, and closes both at hour 82; it stops when
  solved or at the time limit.

Scenarios can be read with `acequia.manager.read_random_values` and
`acequia.manager.parse_random_values`, drawn with
`acequia.generator.generate_random_values`, and written with
`acequia.generator.format_random_values` and
`acequia.generator.write_random_values`.

## What it does not do

Solvers are Python functions: `acequia-simulate` chooses between the two
in `acequia.solution`, and `acequia-generate` always runs the default one.
The leaderboard lives only in memory for a single run and holds one entry;
scores are not saved between runs.

## Tests

```
pytest
```