"""
The shared shape of every solver: lines go in one at a time, get folded into
a single piece of running state, and an answer comes out at the end.

Example usage:

from aocsolve.stream import Accumulator, fold_lines

class LineCounter(Accumulator):
    def __init__(self):
        self.count = 0
    def step(self, line):
        if line: self.count += 1
    def finalize(self):
        return self.count

print(fold_lines(LineCounter(), ["a", "", "b"]))
"""

import logging
from enum import Enum
from typing import NamedTuple

from aocsolve.errors import MalformedLine

logger = logging.getLogger(__name__)

class InputLine(NamedTuple):
    """One line of input together with its 1-based position."""
    lineno: int
    text: str

class Accumulator:
    """
    Owns the running state of one solve.

    Subclasses implement step(), called once per line in input order, and
    finalize(), called once after the last line to produce the result. An
    instance is meant for a single pass; build a new one to solve again.
    """

    def step(self, line: str):
        raise NotImplementedError

    def finalize(self):
        raise NotImplementedError

class ParseMode(Enum):
    SECTION1 = 1
    SECTION2 = 2

class PhasedAccumulator(Accumulator):
    """
    An Accumulator for input made of two sections.

    Lines go to step_section1() until it returns False (meaning the line was
    the section boundary); from then on they go to step_section2(). There is
    no way back to the first section.
    """

    def __init__(self):
        self.mode = ParseMode.SECTION1
        self.boundary_lineno = None
        self._seen = 0

    def step(self, line: str):
        self._seen += 1
        if self.mode is ParseMode.SECTION2:
            self.step_section2(line)
        elif not self.step_section1(line):
            self.mode = ParseMode.SECTION2
            self.boundary_lineno = self._seen
            logger.info("section boundary at line %d", self._seen)

    def step_section1(self, line: str) -> bool:
        raise NotImplementedError

    def step_section2(self, line: str):
        raise NotImplementedError

def fold_lines(acc: Accumulator, lines):
    """
    Feeds lines into acc in order and returns acc.finalize().

    A MalformedLine raised while stepping gets the offending line number
    attached before it propagates.
    """
    for item in map(InputLine._make, enumerate(lines, start=1)):
        try:
            acc.step(item.text)
        except MalformedLine as exc:
            if exc.lineno is None: exc.lineno = item.lineno
            if exc.line is None: exc.line = item.text
            raise
    return acc.finalize()
