"""
Day 3: Rucksack Reorganization.

Part 1 looks for the item type found in both compartments (halves) of a
rucksack, part 2 for the badge common to each group of three elves.
"""

import logging
import sys

from aocsolve.errors import MalformedLine, InvalidItemType
from aocsolve.formatting import comma_pair
from aocsolve.parsers import HalfSplitParser, Outcome, Tag
from aocsolve.stream import Accumulator, fold_lines
from aocsolve.util import run_solution

logger = logging.getLogger(__name__)

GROUP_SIZE = 3

def priority(item: str):
    """a-z are 1-26, A-Z are 27-52."""
    if "a" <= item <= "z" and len(item) == 1:
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z" and len(item) == 1:
        return ord(item) - ord("A") + 27
    raise InvalidItemType(item)

def common_items(a: str, b: str):
    """Distinct characters of a that also appear in b, in order of a."""
    in_b = set(b)
    return "".join(z for z in dict.fromkeys(a) if z in in_b)

class RucksackIntersector(Accumulator):
    def __init__(self, parser):
        self.parser = parser
        self.compartment_sum = 0
        self.badge_sum = 0
        self.group_common = None
        self.in_group = 0

    def step(self, line):
        match self.parser(line):
            case Outcome(Tag.SKIP, _):
                return
            case Outcome(Tag.ERROR, err):
                raise err
            case Outcome(Tag.OK, (left, right)):
                self.compartment_sum += self._priority_of_common(left, right)
                self._add_to_group(left + right)

    def _add_to_group(self, items):
        if self.in_group == 0:
            self.group_common = items
        else:
            self.group_common = common_items(self.group_common, items)
        self.in_group = (self.in_group + 1) % GROUP_SIZE
        if self.in_group == 0:
            self.badge_sum += self._priority_of_common(self.group_common)

    @staticmethod
    def _priority_of_common(*parts):
        common = parts[0]
        for part in parts[1:]:
            common = common_items(common, part)
        if not common: raise MalformedLine("no item in common")
        return priority(common[0])

    def finalize(self):
        if self.in_group:
            logger.warning("ignoring incomplete group of %d rucksacks",
                           self.in_group)
        return (self.compartment_sum, self.badge_sum)

def solve(lines, part=None):
    compartments, badges = fold_lines(RucksackIntersector(HalfSplitParser()),
                                      lines)
    if part == 1: return compartments
    if part == 2: return badges
    return comma_pair(compartments, badges)

def main(argv=None):
    return run_solution(solve, argv)

if __name__ == "__main__":
    sys.exit(main())
