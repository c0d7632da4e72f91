"""
Small parser combinators for pulling structured values out of a single line.

Atoms are regexes; "+" runs parsers in sequence, "|" takes the first that
matches and star() repeats one. Results can be converted on the way out
(e.g. to int) or dropped with skip(), so a grammar like the crane's moves
reads close to the text it parses:

from aocsolve.parsing import keyword, number

move = (keyword("move") + number() + keyword("from") + number()
        + keyword("to") + number())
print(move.parse("move 3 from 1 to 2"))  # [3, 1, 2]
"""

import re
from functools import cache

_SKIPPED = object()
_WS_PATT = re.compile(r"\s*")

def _skip_ws(s, i):
    return _WS_PATT.match(s, i).end()

class Parser:
    """
    Wraps a parse function parse_fn(s, i), which returns (result, end) for a
    match starting at index i of s, or None.

    Parsers are immutable; conv() and skip() return new instances.
    """

    __slots__ = ("_parse_fn", "_conversions", "_trim_ws")

    def __init__(self, parse_fn, conversions=(), trim_ws=False):
        self._parse_fn = parse_fn
        self._conversions = conversions
        self._trim_ws = trim_ws

    def conv(self, *fns):
        """
        Applies fns to the result, in order. A conversion returning None
        fails the parse.
        """
        if not fns: return self
        # a plain Parser, so a converted sequence is not flattened into its
        # neighbours
        return Parser(self._parse_fn, self._conversions + fns, self._trim_ws)

    def skip(self):
        """Matches as before but contributes nothing to the result."""
        return self.conv(lambda _: _SKIPPED)

    def __add__(self, other):
        return _Sequence(self, other)

    def __or__(self, other):
        return _Alternatives(self, other)

    def run(self, s: str, i: int):
        """Returns (result, end_of_consumed_range) for a match at i, or None."""
        if self._trim_ws: i = _skip_ws(s, i)

        ret = self._parse_fn(s, i)
        if ret is None: return None

        result, i = ret
        for fn in self._conversions:
            result = fn(result)
            if result is _SKIPPED:
                result = None
            elif result is None:
                return None
        if self._trim_ws: i = _skip_ws(s, i)
        return (result, i)

    def parse(self, s: str):
        """Result of a match covering all of s, or None."""
        ret = self.run(s, 0)
        if ret is None or ret[1] != len(s): return None
        return ret[0]

class _Combined(Parser):
    """
    Base of "+" and "|". Combining the same kind again ("a + b + c") extends
    the flat tuple of parts instead of nesting.
    """

    __slots__ = ("_parts",)

    def __init__(self, *parsers):
        parts = []
        for p in parsers:
            parts.extend(p._parts if type(p) is type(self) else (p,))
        self._parts = tuple(parts)
        super().__init__(self._combine)

    def _combine(self, s, i):
        raise NotImplementedError

class _Sequence(_Combined):
    """All parts in turn; the result is the list of their non-None results."""

    def _combine(self, s, i):
        results = []
        for p in self._parts:
            ret = p.run(s, i)
            if ret is None: return None
            _collect(results, ret[0])
            i = ret[1]
        return (results, i)

class _Alternatives(_Combined):
    """The first part that matches."""

    def _combine(self, s, i):
        for p in self._parts:
            ret = p.run(s, i)
            if ret is not None: return ret
        return None

def star(p: Parser):
    """
    Repeats p for as long as it matches (possibly zero times). Results are
    collected like a sequence's. Stops early if p matches without consuming
    anything.
    """
    def parse_fn(s, i):
        results = []
        while (ret := p.run(s, i)) is not None:
            _collect(results, ret[0])
            if ret[1] == i: break
            i = ret[1]
        return (results, i)
    return Parser(parse_fn)

@cache
def regex(z: str):
    """
    Matches a regex, trimming surrounding whitespace.

    The result is the single captured group, a tuple when there are several
    groups, or the whole match when there are none.
    """
    patt = re.compile(z)
    def parse_fn(s, i):
        match = patt.match(s, i)
        if not match: return None
        groups = match.groups()
        value = groups if len(groups) > 1 else match.group(len(groups))
        return (value, match.end())
    return Parser(parse_fn, trim_ws=True)

@cache
def number():
    """An unsigned decimal integer."""
    return regex("[0-9]+").conv(int)

@cache
def keyword(word: str):
    """The given word on its own; matched but left out of results."""
    return regex(re.escape(word) + r"\b").skip()

def _collect(acc, result):
    """Flattens list results into acc, dropping None's."""
    if isinstance(result, list):
        acc.extend(z for z in result if z is not None)
    elif result is not None:
        acc.append(result)
