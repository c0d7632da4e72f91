"""
Runs a solver by year and day, e.g. "python -m aocsolve 2022 5 input -p 1".

Everything after the day is handed to the solver's own command line.
"""

import argparse
import importlib
import sys

from aocsolve.util import setup_logger

def load_solver(year: int, day: int):
    """Returns the solver module for the given puzzle, or None."""
    name = f"aocsolve.y{year}.day{day:02d}"
    try:
        return importlib.import_module(name)
    except ModuleNotFoundError as exc:
        if exc.name is not None and not name.startswith(exc.name): raise
        return None

def main(argv=None):
    arg_parser = argparse.ArgumentParser(prog="aocsolve")
    arg_parser.add_argument("year", type=int)
    arg_parser.add_argument("day", type=int)
    args, rest = arg_parser.parse_known_args(argv)

    solver = load_solver(args.year, args.day)
    if solver is None:
        setup_logger().error("no solver for %d day %d", args.year, args.day)
        return 1
    return solver.main(rest)

if __name__ == "__main__":
    sys.exit(main())
