from aocsolve.parsing import regex, star, number, keyword

def test_regex_returns_group_or_whole_match():
    assert regex("([a-z]+)=[0-9]+").parse("x=1") == "x"
    assert regex("([a-z]+)=([0-9]+)").parse("x=1") == ("x", "1")
    assert regex("[a-z]+").parse("abc") == "abc"

def test_parse_must_consume_whole_string():
    assert regex("[0-9]+").parse("12ab") is None

def test_regex_trims_whitespace():
    assert number().parse("  42  ") == 42

def test_conversion_to_none_fails_the_parse():
    p = regex("[0-9]+").conv(lambda _: None)
    assert p.parse("1") is None

def test_chain_flattens_and_drops_skipped():
    p = number() + regex("-").skip() + number()
    assert p.parse("2-4") == [2, 4]

def test_keyword_needs_a_word_boundary():
    p = keyword("to") + number()
    assert p.parse("to 3") == [3]
    assert p.parse("toe 3") is None

def test_first_match_and_star():
    p = star(number() | regex("[^0-9]+").skip())
    assert p.parse("move 3 from 1 to 2") == [3, 1, 2]
    assert p.parse("") == []

def test_star_stops_on_empty_match():
    # "x*" matches the empty string forever once the x's run out
    assert star(regex("x*")).parse("xx") == ["xx", ""]

def test_parsers_are_immutable():
    base = regex("[0-9]+")
    converted = base.conv(int)
    assert base.parse("7") == "7"
    assert converted.parse("7") == 7
