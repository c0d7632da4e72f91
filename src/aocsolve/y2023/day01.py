"""
Day 1: Trebuchet?!

Each line's calibration value is its first digit followed by its last digit.
Digits may be spelled out ("one".."nine"), and spelled-out digits may share
letters ("eightwo" holds both 8 and 2).
"""

import logging
import sys

from aocsolve.formatting import labelled
from aocsolve.stream import Accumulator, fold_lines
from aocsolve.util import run_solution

logger = logging.getLogger(__name__)

NUMERIC_DIGITS = tuple((str(n), n) for n in range(10))
SPELLED_DIGITS = tuple(zip(
    ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine"),
    range(1, 10)))
# On equal offsets the earlier entry wins.
ALL_DIGITS = NUMERIC_DIGITS + SPELLED_DIGITS

def first_and_last(line: str, patterns):
    """
    Finds the digit starting first and the digit ending last in line.

    Returns (first, last) digit values, or None if no pattern occurs.
    """
    first = last = None
    for (patt, value) in patterns:
        pos = line.find(patt)
        if pos < 0: continue
        if first is None or pos < first[0]:
            first = (pos, value)
        end = line.rfind(patt) + len(patt)
        if last is None or end > last[0]:
            last = (end, value)
    if first is None: return None
    return (first[1], last[1])

class CalibrationDigitExtractor(Accumulator):
    def __init__(self, patterns=ALL_DIGITS):
        self.patterns = tuple(patterns)
        self.total = 0

    def step(self, line):
        line = line.strip()
        if not line: return
        digits = first_and_last(line, self.patterns)
        if digits is None:
            logger.warning("no digits in %r, counting it as 0", line)
            return
        first, last = digits
        self.total += first * 10 + last

    def finalize(self):
        return self.total

def solve(lines, part=None):
    patterns = NUMERIC_DIGITS if part == 1 else ALL_DIGITS
    total = fold_lines(CalibrationDigitExtractor(patterns), lines)
    return labelled("Sum of calibration values", total)

def main(argv=None):
    return run_solution(solve, argv)

if __name__ == "__main__":
    sys.exit(main())
