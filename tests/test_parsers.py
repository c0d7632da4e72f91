import pytest

from aocsolve.errors import ImbalancedInput, UnknownToken, MalformedLine
from aocsolve.parsers import (HalfSplitParser, NumericTokenParser,
                              FixedColumnParser, WordPairParser, Outcome, Tag,
                              unwrap)

@pytest.mark.parametrize("line", [
    "vJrwpWtwJgWrhcsFMMfFFhFp",
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL",
    "ab",
])
def test_half_split_halves_rebuild_the_line(line):
    outcome = HalfSplitParser()(line + "  ")
    assert outcome.tag is Tag.OK
    left, right = outcome.value
    assert len(left) == len(right)
    assert left + right == line

def test_half_split_odd_length_is_an_error():
    outcome = HalfSplitParser()("abc")
    assert outcome.tag is Tag.ERROR
    assert isinstance(outcome.value, ImbalancedInput)
    with pytest.raises(ImbalancedInput):
        unwrap(outcome)

def test_half_split_blank_is_skipped():
    assert HalfSplitParser()("   ") == Outcome(Tag.SKIP)

def test_numeric_tokens():
    parse = NumericTokenParser()
    assert parse("2-4,6-8") == Outcome(Tag.OK, [2, 4, 6, 8])
    assert parse("move 13 from 1 to 9") == Outcome(Tag.OK, [13, 1, 9])
    assert parse("no digits here").tag is Tag.SKIP
    assert parse("").tag is Tag.SKIP

def test_fixed_columns():
    parse = FixedColumnParser()
    assert parse("    [D]    ") == Outcome(Tag.OK, [" ", "D"])
    assert parse("[Z] [M] [P]") == Outcome(Tag.OK, ["Z", "M", "P"])
    assert parse("").tag is Tag.SKIP

def test_word_pair_maps_through_table():
    parse = WordPairParser({"A": 0, "X": 2})
    assert parse("A X") == Outcome(Tag.OK, (0, 2))
    assert parse("").tag is Tag.SKIP

def test_word_pair_unknown_token():
    outcome = WordPairParser({"A": 0})("A Q")
    assert outcome.tag is Tag.ERROR
    assert isinstance(outcome.value, UnknownToken)
    assert outcome.value.token == "Q"

def test_word_pair_wrong_count():
    outcome = WordPairParser({"A": 0})("A A A")
    assert outcome.tag is Tag.ERROR
    assert type(outcome.value) is MalformedLine

def test_word_pair_table_is_read_only():
    table = {"A": 0}
    parser = WordPairParser(table)
    table["B"] = 1
    assert "B" not in parser.table
    with pytest.raises(TypeError):
        parser.table["C"] = 2

def test_parsers_are_pure():
    parse = NumericTokenParser()
    assert parse("1 2") == parse("1 2")
