"""
Day 2: Rock Paper Scissors.

Gestures and outcomes are both coded 0..2 (rock/paper/scissors and
lose/draw/win) so the game reduces to arithmetic mod 3.
"""

import sys
from types import MappingProxyType

from aocsolve.parsers import WordPairParser, Outcome, Tag
from aocsolve.stream import Accumulator, fold_lines
from aocsolve.util import run_solution

ROCK, PAPER, SCISSORS = 0, 1, 2
LOSE, DRAW, WIN = 0, 1, 2

# Second column: our gesture in part 1, the required outcome in part 2.
STRATEGY_CODES = MappingProxyType({
    "A": ROCK, "B": PAPER, "C": SCISSORS,
    "X": 0, "Y": 1, "Z": 2,
})

def play(ours, theirs):
    return (4 + ours - theirs) % 3

def predict_ours(outcome, theirs):
    return (2 + outcome + theirs) % 3

def score(ours, outcome):
    return (1 + ours) + 3 * outcome

class RockPaperScissorsScorer(Accumulator):
    def __init__(self, parser, second_is_outcome=False):
        self.parser = parser
        self.second_is_outcome = second_is_outcome
        self.total = 0

    def step(self, line):
        match self.parser(line):
            case Outcome(Tag.SKIP, _):
                return
            case Outcome(Tag.ERROR, err):
                raise err
            case Outcome(Tag.OK, (theirs, second)):
                if self.second_is_outcome:
                    outcome = second
                    ours = predict_ours(outcome, theirs)
                else:
                    ours = second
                    outcome = play(ours, theirs)
                self.total += score(ours, outcome)

    def finalize(self):
        return self.total

def solve(lines, part=None):
    scorer = RockPaperScissorsScorer(WordPairParser(STRATEGY_CODES),
                                     second_is_outcome=(part == 2))
    return fold_lines(scorer, lines)

def main(argv=None):
    return run_solution(solve, argv)

if __name__ == "__main__":
    sys.exit(main())
