# solarium

A small gravitational N-body simulator. It puts a sun-sized mass at rest at
the origin. It then places Earth-sized bodies at random points in a cube
100 AU wide and gives each one a random velocity. The system advances in
one-hour steps. The gravitational force on each body is approximated with
a Barnes-Hut octree.

## Installing

```
pip install .
```

## Running

```
solarium [--objects N] [--seed S] [--steps N] [--years N]
```

- `--objects`: the number of bodies, including the sun. The default is 10000.
- `--seed`: the random seed used to build the starting configuration. The default is 0.
- `--steps`: the maximum number of steps to take. The default is 100.
- `--years`: the maximum number of simulated years, at 8766 steps per year. The default is 1.

Each value must be positive. The simulation stops as soon as either limit
is reached.

The command first prints `START position` and the position of every body
in astronomical units. It then runs the simulation. Every 100 steps it
writes a `STEP` line to standard error. When it finishes it prints
`END position`, the final positions, and the elapsed wall-clock time in
milliseconds.

The force computation is plain Python, so the default of 10000 bodies
runs slowly. Use `--objects` to try smaller systems.

## Using it as a library

```python
from solarium.simulation import Simulation, ObjectDynamics, initialize_objects
from solarium.main import run
from solarium.octree import Octree
from solarium.vector3 import Vector3
from solarium.interval import Box, Interval
from solarium.timer import Timer, TimerState
from solarium.thread_pool import ThreadPool
from solarium.problem_file import load_problem_file, parse_problem_file
```

- `Vector3`: an immutable 3-D vector. It supports `+`, `-`, scalar `*` and `/`, and `magnitude_squared()`.
- `Interval` and `Box`: rectangular regions of space. A `Box` can report its `center()`, its `largest_side()`, and each of its eight octants through `subregion(index)`.
- `Octree(region)`: a tree of point masses.
  - Call `insert(position, mass)` for each body, then `refresh_interior()` to compute the centres of mass.
  - `force(position, mass)` then returns the approximate gravitational force on a body at that position.
  - Inserting two bodies at exactly the same position raises `ValueError`.
  - `clear()` empties the tree.
- `Simulation(masses, dynamics, time_step, region)`: holds one mass and one `ObjectDynamics` (position and velocity) per body.
  - `step()` advances every body by one time step.
  - `build_octree()` returns the tree for the current positions.
  - `dump_dynamics()` returns one formatted line per body, with positions in AU.
- `initialize_objects(count, seed)`: builds the random starting configuration.
- `run(simulation, max_steps, steps_per_year, max_years, out, err)`: the loop that the command uses. It returns the number of steps taken.
- `Timer`: a stopwatch that keeps accumulated time across repeated `start()` and `stop()` calls. `elapsed_ms()` reads it. You can pass it your own clock function.
- `ThreadPool(size)`: a fixed set of worker threads.
  - `start(function, *args)` returns a thread id, and `result(thread_id)` waits for that task's return value. An exception raised by the task is raised again there.
  - Use it as a context manager, or call `close()`.
- `parse_problem_file(lines)` and `load_problem_file(path)`: read a problem instance file.
  - The file holds `name = value` lines, and `#` starts a comment.
  - The first setting must be `Version = 1`.
  - The settings come back as a dict.
  - A malformed file raises `InvalidFormatError`, `MissingVersionError` or `UnexpectedVersionError`, all subclasses of `ProblemFileError`.

## What it does not do

- The `solarium` command does not read problem files. The starting configuration always comes from `initialize_objects`.
- `Simulation.step()` runs in a single thread. `ThreadPool` is available for your own code, but the simulation does not use it.
- Bodies that leave the 200 AU region are not handled specially.
- Results are printed, not saved in any other form.

## Running the tests

```
pip install .[test]
pytest
```