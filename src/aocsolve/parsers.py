"""
Line parsers shared by the solvers.

A line parser never raises on bad input. It returns an Outcome tagged OK (with
the parsed value), SKIP (nothing to parse, e.g. a blank line; also the
section boundary signal for two-section inputs) or ERROR (with the exception
describing what's wrong), so callers can branch with a match statement:

match parser(line):
    case Outcome(Tag.OK, value): ...
    case Outcome(Tag.SKIP, _): ...
    case Outcome(Tag.ERROR, err): raise err
"""

from enum import Enum
from functools import cache
from types import MappingProxyType
from typing import NamedTuple, Any

from aocsolve.errors import MalformedLine, ImbalancedInput, UnknownToken
from aocsolve.parsing import number, regex, star

class Tag(Enum):
    OK = "ok"
    SKIP = "skip"
    ERROR = "error"

class Outcome(NamedTuple):
    tag: Tag
    value: Any = None

def ok(value): return Outcome(Tag.OK, value)
def skip(): return Outcome(Tag.SKIP)
def error(exc): return Outcome(Tag.ERROR, exc)

def unwrap(outcome: Outcome):
    """Returns the OK value, None for SKIP, and raises the ERROR exception."""
    if outcome.tag is Tag.ERROR: raise outcome.value
    return outcome.value

class HalfSplitParser:
    """Splits a (stripped) line into two halves of equal length."""

    __slots__ = ()

    def __call__(self, line: str) -> Outcome:
        line = line.strip()
        if not line: return skip()
        if len(line) % 2: return error(ImbalancedInput(line))
        mid = len(line) // 2
        return ok((line[:mid], line[mid:]))

@cache
def _int_tokens():
    filler = regex("[^0-9]+").skip()
    return star(number() | filler)

@cache
def _words():
    return star(regex(r"\S+"))

class NumericTokenParser:
    """
    Extracts every run of decimal digits as an int.

    There are no signs: "2-4,6-8" gives [2, 4, 6, 8]. Lines without digits
    are skipped.
    """

    __slots__ = ()

    def __call__(self, line: str) -> Outcome:
        nums = _int_tokens().parse(line)
        if nums is None: return error(MalformedLine("unparsable numbers", line))
        if not nums: return skip()
        return ok(nums)

class FixedColumnParser:
    """
    Picks the character at every 4th column starting at column 1, which is
    where the crate letters sit in a drawing like "[Z] [M] [P]". Columns with
    no crate come out as " ".

    A blank line has no columns and is skipped.
    """

    __slots__ = ()

    def __call__(self, line: str) -> Outcome:
        cols = list(line.rstrip()[1::4])
        if not cols: return skip()
        return ok(cols)

class WordPairParser:
    """
    Maps the two whitespace-separated words of a line to their codes in the
    given table.
    """

    __slots__ = ("_table",)

    def __init__(self, table):
        self._table = MappingProxyType(dict(table))

    @property
    def table(self):
        return self._table

    def __call__(self, line: str) -> Outcome:
        words = _words().parse(line)
        if words is None: return error(MalformedLine("unparsable words", line))
        if not words: return skip()
        for word in words:
            if word not in self._table: return error(UnknownToken(word, line))
        if len(words) != 2:
            return error(MalformedLine(f"expected 2 words, got {len(words)}",
                                       line))
        return ok(tuple(self._table[word] for word in words))
