"""
Errors raised while reading and solving puzzle input.

Every failure is fatal for the run: puzzle inputs are assumed well-formed, so
a line that doesn't fit its grammar points at a bug rather than at data that
could be skipped.
"""

class SolverError(Exception):
    """Base class for everything run_solution reports as a failed run."""

class SourceUnavailable(SolverError):
    """The input path could not be opened."""

    def __init__(self, path):
        super().__init__(f"cannot read input from {path}")
        self.path = path

class MalformedLine(SolverError):
    """
    A line violates the grammar expected by its parser.

    lineno is usually unknown where the error is raised; fold_lines() fills it
    in on the way out.
    """

    def __init__(self, reason: str, line=None, lineno=None):
        super().__init__(reason)
        self.reason = reason
        self.line = line
        self.lineno = lineno

    def __str__(self):
        where = f"line {self.lineno}: " if self.lineno is not None else ""
        if self.line is None:
            return where + self.reason
        return f"{where}{self.reason} ({self.line!r})"

class ImbalancedInput(MalformedLine):
    """A line meant to be split in half has odd length."""

    def __init__(self, line, lineno=None):
        super().__init__("odd length, cannot split in half", line, lineno)

class UnknownToken(MalformedLine):
    """A word has no entry in the parser's lookup table."""

    def __init__(self, token, line=None, lineno=None):
        super().__init__(f"unknown token {token!r}", line, lineno)
        self.token = token

class InvalidItemType(MalformedLine):
    """A character falls outside the alphabet that has priorities."""

    def __init__(self, item, line=None, lineno=None):
        super().__init__(f"bad item type {item!r}", line, lineno)
        self.item = item
