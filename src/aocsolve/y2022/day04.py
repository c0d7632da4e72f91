"""
Day 4: Camp Cleanup.

Counts pairs of section ranges where one range contains the other, and pairs
that overlap at all.
"""

import sys

from aocsolve.errors import MalformedLine
from aocsolve.formatting import comma_pair
from aocsolve.parsers import NumericTokenParser, Outcome, Tag
from aocsolve.stream import Accumulator, fold_lines
from aocsolve.util import run_solution, cmp

def contains(s1, e1, s2, e2):
    # same as s1 >= s2 and e1 <= e2 or s2 >= s1 and e2 <= e1
    return cmp(s1, s2) * cmp(e1, e2) <= 0

def overlaps(s1, e1, s2, e2):
    return s1 <= e2 and s2 <= e1

class RangeOverlapCounter(Accumulator):
    def __init__(self, parser):
        self.parser = parser
        self.contain = 0
        self.overlap = 0

    def step(self, line):
        match self.parser(line):
            case Outcome(Tag.SKIP, _):
                return
            case Outcome(Tag.ERROR, err):
                raise err
            case Outcome(Tag.OK, [s1, e1, s2, e2]):
                self.contain += contains(s1, e1, s2, e2)
                self.overlap += overlaps(s1, e1, s2, e2)
            case Outcome(Tag.OK, nums):
                raise MalformedLine(f"expected 4 numbers, got {len(nums)}")

    def finalize(self):
        return (self.contain, self.overlap)

def solve(lines, part=None):
    contain, overlap = fold_lines(RangeOverlapCounter(NumericTokenParser()),
                                  lines)
    if part == 1: return contain
    if part == 2: return overlap
    return comma_pair(contain, overlap)

def main(argv=None):
    return run_solution(solve, argv)

if __name__ == "__main__":
    sys.exit(main())
