"""
Day 5: Supply Stacks.

The input is a drawing of the crate stacks, a blank line, then the crane's
moves. By default the crane lifts several crates at once, keeping their order;
part 1 models the older crane that moves them one at a time (reversing them).
"""

import logging
import sys
from functools import cache

from aocsolve.errors import MalformedLine
from aocsolve.formatting import concat
from aocsolve.parsers import FixedColumnParser, Tag, unwrap
from aocsolve.parsing import keyword, number
from aocsolve.stream import PhasedAccumulator, fold_lines
from aocsolve.struct import CrateStacks
from aocsolve.util import run_solution

logger = logging.getLogger(__name__)

@cache
def move_grammar():
    """Parses "move K from A to B" into [K, A, B]."""
    return (keyword("move") + number() + keyword("from") + number()
            + keyword("to") + number())

def is_label_row(cols):
    """The " 1   2   3 " row under the drawing numbers the stacks."""
    return any(z.isdigit() for z in cols) and all(
        z.isdigit() or z == " " for z in cols)

class CrateStackSimulator(PhasedAccumulator):
    def __init__(self, reverse_on_move=False):
        super().__init__()
        self.stacks = CrateStacks()
        self.reverse_on_move = reverse_on_move
        self.drawing_parser = FixedColumnParser()

    def step_section1(self, line):
        outcome = self.drawing_parser(line)
        if outcome.tag is Tag.SKIP: return False

        cols = unwrap(outcome)
        if is_label_row(cols):
            logger.info("ignoring stack labels %r", line.strip())
        else:
            self.stacks.add_layer_below(cols)
        return True

    def step_section2(self, line):
        if not line.strip(): return
        move = move_grammar().parse(line)
        if move is None: raise MalformedLine("expected 'move K from A to B'")

        count, src, dst = move
        try:
            self.stacks.move(count, src - 1, dst - 1,
                             reverse=self.reverse_on_move)
        except (IndexError, ValueError) as exc:
            raise MalformedLine(f"impossible move: {exc}") from exc

    def finalize(self):
        return self.stacks.tops()

def solve(lines, part=None):
    tops = fold_lines(CrateStackSimulator(reverse_on_move=(part == 1)), lines)
    return concat(tops)

def main(argv=None):
    return run_solution(solve, argv)

if __name__ == "__main__":
    sys.exit(main())
