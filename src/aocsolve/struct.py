"""
Handy data structures.
"""

from bisect import insort

class TopK():
    """Keeps the k largest values inserted so far (equal values all count)."""

    def __init__(self, k: int):
        if k < 1: raise ValueError(f"k must be positive, got {k}")
        self._k = k
        self._v = [] # ascending

    def insert(self, val):
        insort(self._v, val)
        if len(self._v) > self._k:
            del self._v[0]

    def values(self):
        """Returns the kept values, largest first."""
        return self._v[::-1]

    def total(self):
        return sum(self._v)

class CrateStacks():
    """
    A row of stacks, each a list ordered bottom to top.

    All stacks live in one list and are addressed by 0-based index, so a move
    between two stacks never holds two references into the row at once.
    """

    def __init__(self):
        self._stacks = []

    def add_layer_below(self, layer):
        """
        Slides a layer of crates under the existing ones. layer[i] goes to
        stack i; " " means no crate in that column.
        """
        while len(self._stacks) < len(layer):
            self._stacks.append([])
        for (i, crate) in enumerate(layer):
            if crate != " ":
                self._stacks[i].insert(0, crate)

    def move(self, count: int, src: int, dst: int, reverse=False):
        """
        Moves the top count crates of stack src onto stack dst, keeping their
        order unless reverse is set (as when they're moved one at a time).

        Raises IndexError for an unknown stack and ValueError when src holds
        fewer than count crates.
        """
        for idx in (src, dst):
            if not 0 <= idx < len(self._stacks):
                raise IndexError(f"no stack {idx + 1}")
        if not 0 <= count <= len(self._stacks[src]):
            raise ValueError(f"cannot move {count} crates from stack "
                             f"{src + 1} holding {len(self._stacks[src])}")
        if count == 0: return

        moved = self._stacks[src][-count:]
        del self._stacks[src][-count:]
        if reverse: moved.reverse()
        self._stacks[dst].extend(moved)

    def tops(self):
        """Top crate of every non-empty stack, left to right."""
        return [stack[-1] for stack in self._stacks if stack]
