import argparse
import logging
import sys
from inspect import signature

from aocsolve.errors import SolverError, SourceUnavailable

DEFAULT_INPUT = "input"

def run_solution(solution, argv=None, default_filename=DEFAULT_INPUT):
    """
    Basic AoC main: takes care of getting input and printing the answer.

    solution(lines) or solution(lines, part) receives a lazy iterator of
    rstripped lines and returns the answer text. Returns the process exit
    code (0 on success, 1 when the input couldn't be read or solved).
    """
    arg_parser = argparse.ArgumentParser()
    arg_parser.add_argument("--part", "-p", type=int, choices=(1, 2))
    arg_parser.add_argument("--verbose", "-v", action="store_true")
    arg_parser.add_argument("filename", nargs="?", default=default_filename,
                            help=f"input file, '-' for stdin "
                                 f"(default: {default_filename})")
    args = arg_parser.parse_args(argv)
    logger = setup_logger(args.verbose)

    try:
        input_lines = read_lines(args.filename)
        if len(signature(solution).parameters) > 1:
            answer = solution(input_lines, args.part)
        else:
            if args.part is not None:
                logger.warning("ignoring --part=%d", args.part)
            answer = solution(input_lines)
    except SolverError as exc:
        logger.error("%s", exc)
        return 1

    print(answer)
    return 0

def setup_logger(verbose=False):
    """Sends aocsolve diagnostics to stderr, keeping stdout for the answer."""
    logger = logging.getLogger("aocsolve")
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False

    logger.handlers.clear()
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    return logger

def read_lines(path=DEFAULT_INPUT):
    """
    Opens path ("-" for stdin) and returns a lazy iterator of rstripped lines.

    The open happens right away so a bad path fails here rather than on the
    first next(). A file is closed once the iterator is exhausted; stdin is
    left open. Input that isn't valid UTF-8 raises SourceUnavailable midway.
    """
    if path == "-":
        return _rstripped_lines(sys.stdin, path)
    try:
        infile = open(path, "r", encoding="utf-8")
    except OSError as exc:
        raise SourceUnavailable(path) from exc
    return _closing_lines(infile, path)

def _closing_lines(infile, path):
    with infile as f:
        yield from _rstripped_lines(f, path)

def _rstripped_lines(f, path):
    try:
        for line in f:
            yield line.rstrip()
    except UnicodeDecodeError as exc:
        raise SourceUnavailable(path) from exc

# python3 killed cmp for some reason
def cmp(a, b):
    return (a > b) - (a < b)
