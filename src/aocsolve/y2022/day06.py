"""
Day 6: Tuning Trouble.

A marker is a run of pairwise distinct characters: 4 long for the
start-of-packet marker (part 1), 14 for the start-of-message marker.
"""

import sys

from aocsolve.formatting import line_per_item
from aocsolve.stream import Accumulator, fold_lines
from aocsolve.util import run_solution

PACKET_MARKER_LENGTH = 4
MESSAGE_MARKER_LENGTH = 14

def find_distinct_window(s: str, length: int):
    """
    Returns the 1-based index of the last character of the first window of
    the given length whose characters are all distinct, or None.
    """
    if length < 1: raise ValueError(f"window length must be positive: {length}")
    last_seen = {}
    start = 0
    for (i, ch) in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = i
        if i - start + 1 >= length:
            return i + 1
    return None

class DistinctWindowFinder(Accumulator):
    """Finds the marker in every non-blank line."""

    def __init__(self, length=MESSAGE_MARKER_LENGTH):
        if length < 1: raise ValueError(f"window length must be positive: {length}")
        self.length = length
        self.found = []

    def step(self, line):
        line = line.strip()
        if not line: return
        self.found.append(find_distinct_window(line, self.length))

    def finalize(self):
        return list(self.found)

def solve(lines, part=None):
    length = PACKET_MARKER_LENGTH if part == 1 else MESSAGE_MARKER_LENGTH
    return line_per_item(fold_lines(DistinctWindowFinder(length), lines))

def main(argv=None):
    return run_solution(solve, argv)

if __name__ == "__main__":
    sys.exit(main())
