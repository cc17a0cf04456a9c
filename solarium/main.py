"""Command that runs the Barnes-Hut solar system simulation."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from solarium.simulation import OBJECT_COUNT, Simulation, initialize_objects
from solarium.timer import Timer

STEPS_PER_YEAR = 8766
"""Number of hours in a year."""


def _write_dynamics(simulation: Simulation, out: TextIO) -> None:
    for line in simulation.dump_dynamics():
        out.write(line + "\n")


def run(
    simulation: Simulation,
    max_steps: int = 100,
    steps_per_year: int = STEPS_PER_YEAR,
    max_years: int = 1,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Step the simulation until max_steps or max_years is reached.

    Positions are written to out before and after; progress goes to err.
    Returns the number of steps taken.
    """
    if max_steps < 1 or steps_per_year < 1 or max_years < 1:
        raise ValueError("step and year limits must be positive")
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    stopwatch = Timer()
    total_steps = 0
    total_years = 0

    out.write("START position\n")
    _write_dynamics(simulation, out)
    stopwatch.start()
    while True:
        simulation.step()
        total_steps += 1

        if total_steps % 100 == 0:
            err.write(f"STEP {total_steps:4d}\n")

        if total_steps % steps_per_year == 0:
            total_years += 1
            if total_years % 10 == 0:
                err.write(f"Years simulated = {total_years}\r")
                err.flush()
            if total_years == max_years:
                break

        if total_steps == max_steps:
            break
    stopwatch.stop()
    out.write("\nEND position\n")
    _write_dynamics(simulation, out)
    out.write(f"Time elapsed = {stopwatch.elapsed_ms()} milliseconds\n")
    return total_steps


def main(argv: Optional[List[str]] = None) -> int:
    """Run the simulation from the command line."""
    parser = argparse.ArgumentParser(description="Barnes-Hut solar system simulator.")
    parser.add_argument("--objects", type=int, default=OBJECT_COUNT, help="number of objects")
    parser.add_argument("--seed", type=int, default=0, help="random seed for initialization")
    parser.add_argument("--steps", type=int, default=100, help="maximum number of steps")
    parser.add_argument("--years", type=int, default=1, help="maximum number of years")
    args = parser.parse_args(argv)
    if args.objects < 1 or args.steps < 1 or args.years < 1:
        parser.error("--objects, --steps and --years must be positive")

    simulation = initialize_objects(args.objects, args.seed)
    run(simulation, max_steps=args.steps, max_years=args.years)
    return 0


if __name__ == "__main__":
    sys.exit(main())