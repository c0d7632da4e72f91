"""
Day 1: Calorie Counting.

Each elf's snacks are a group of numbers separated from the next elf by a
blank line. Finds the elves carrying the most calories.
"""

import logging
import sys

from aocsolve.errors import MalformedLine
from aocsolve.formatting import sum_expression
from aocsolve.stream import Accumulator, fold_lines
from aocsolve.struct import TopK
from aocsolve.util import run_solution

logger = logging.getLogger(__name__)

TOP_COUNT = 3

class TopKTracker(Accumulator):
    """Sums each group and keeps the k largest sums."""

    def __init__(self, k=TOP_COUNT):
        self.top = TopK(k)
        self.running = 0
        self.in_group = False

    def step(self, line):
        line = line.strip()
        if not line:
            self.end_group()
            return
        if not line.isdecimal():
            raise MalformedLine("expected a calorie count")
        self.running += int(line)
        self.in_group = True

    def end_group(self):
        if not self.in_group: return
        self.top.insert(self.running)
        self.running = 0
        self.in_group = False

    def finalize(self):
        self.end_group()
        return self.top

def solve(lines, part=None):
    top = fold_lines(TopKTracker(), lines)
    largest = top.values()
    logger.info("top %d elves: %s", TOP_COUNT, ", ".join(map(str, largest)))
    if part == 1: return largest[0] if largest else 0
    if part == 2: return top.total()
    return sum_expression(largest)

def main(argv=None):
    return run_solution(solve, argv)

if __name__ == "__main__":
    sys.exit(main())
