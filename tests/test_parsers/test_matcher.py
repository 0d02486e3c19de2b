import pytest

from argmatch.parser import (
    ABSENT,
    FLAG_PRESENT,
    ArgMatch,
    SyntaxOptions,
    count_hyphens,
    flag,
    option,
    parse_value,
)

EQUALS = SyntaxOptions.VALUE_SEP_EQUALS
NO_SPACE = SyntaxOptions.VALUE_SEP_NO_SPACE
NEXT_ARG = SyntaxOptions.VALUE_SEP_NEXT_ARG


@pytest.mark.parametrize(
    "token,expected",
    [("value", 0), ("-v", 1), ("--verbose", 2), ("---x", 3), ("-", 1), ("", 0), ("a-b", 0)],
)
def test_count_hyphens(token, expected):
    assert count_hyphens(token) == expected


def test_flag_exact_match_removes_token():
    tokens = ["a", "--verbose", "b"]
    assert parse_value(flag("verbose"), 1, tokens) == FLAG_PRESENT
    assert tokens == ["a", "b"]


@pytest.mark.parametrize("token", ["--verbosely", "--verb", "-verbose", "verbose", "---verbose"])
def test_flag_requires_exact_name_and_hyphens(token):
    tokens = [token]
    assert parse_value(flag("verbose"), 0, tokens) == ABSENT
    assert tokens == [token]


def test_flag_alias_uses_its_own_inferred_hyphen_count():
    definition = flag("verbose", "v")
    for token in ("--verbose", "-v"):
        tokens = [token]
        assert parse_value(definition, 0, tokens) == FLAG_PRESENT
        assert tokens == []
    for token in ("-verbose", "--v"):
        tokens = [token]
        assert parse_value(definition, 0, tokens) == ABSENT


def test_flag_explicit_hyphens_apply_to_aliases():
    definition = flag("verbose", "v", opts=SyntaxOptions.SINGLE_HYPHEN)
    assert parse_value(definition, 0, ["-verbose"]) == FLAG_PRESENT
    assert parse_value(definition, 0, ["-v"]) == FLAG_PRESENT
    assert parse_value(definition, 0, ["--verbose"]) == ABSENT


def test_option_equals():
    tokens = ["--name=value"]
    assert parse_value(option("name", opts=EQUALS), 0, tokens) == ArgMatch.found("value")
    assert tokens == []


def test_option_equals_keeps_later_equals_in_value():
    tokens = ["--define=key=value"]
    result = parse_value(option("define", opts=EQUALS), 0, tokens)
    assert result.value == "key=value"


def test_option_equals_empty_value():
    tokens = ["--name="]
    assert parse_value(option("name", opts=EQUALS), 0, tokens) == ArgMatch.found("")


def test_option_next_token():
    tokens = ["--name", "value", "extra"]
    assert parse_value(option("name", opts=NEXT_ARG), 0, tokens).value == "value"
    assert tokens == ["extra"]


def test_option_next_token_takes_hyphenated_value():
    tokens = ["--name", "--other"]
    assert parse_value(option("name"), 0, tokens).value == "--other"
    assert tokens == []


def test_option_next_token_at_end_is_present_without_value():
    tokens = ["keep", "--name"]
    result = parse_value(option("name", opts=NEXT_ARG), 1, tokens)
    assert result.present
    assert result.value is None
    assert tokens == ["keep"]


def test_option_no_space():
    tokens = ["-nVALUE"]
    assert parse_value(option("n", opts=NO_SPACE), 0, tokens).value == "VALUE"
    assert tokens == []


def test_option_no_space_long_single_hyphen():
    definition = option("name", opts=SyntaxOptions.SINGLE_HYPHEN | NO_SPACE)
    tokens = ["-namevalue"]
    assert parse_value(definition, 0, tokens).value == "value"


def test_option_no_space_empty_remainder_is_empty_value():
    tokens = ["-n", "next"]
    assert parse_value(option("n", opts=NO_SPACE), 0, tokens) == ArgMatch.found("")
    assert tokens == ["next"]


def test_option_equals_beats_no_space():
    tokens = ["--name=value"]
    result = parse_value(option("name", opts=EQUALS | NO_SPACE), 0, tokens)
    assert result.value == "value"


def test_option_next_token_beats_no_space():
    tokens = ["-n", "value"]
    result = parse_value(option("n", opts=NEXT_ARG | NO_SPACE), 0, tokens)
    assert result.value == "value"
    assert tokens == []


def test_option_separator_mismatch_leaves_tokens():
    tokens = ["--name", "value"]
    assert parse_value(option("name", opts=EQUALS), 0, tokens) == ABSENT
    assert tokens == ["--name", "value"]

    tokens = ["--namevalue"]
    assert parse_value(option("name", opts=EQUALS | NEXT_ARG), 0, tokens) == ABSENT
    assert tokens == ["--namevalue"]


def test_option_alias_prefix_match():
    definition = option("output", "o", opts=EQUALS | NEXT_ARG)
    tokens = ["-o", "out.txt"]
    assert parse_value(definition, 0, tokens).value == "out.txt"
    tokens = ["--output=out.txt"]
    assert parse_value(definition, 0, tokens).value == "out.txt"


def test_option_name_checked_before_aliases():
    definition = option(
        "n", "name", opts=SyntaxOptions.HYPHENS | NO_SPACE
    )
    tokens = ["--namevalue"]
    # "n" is a prefix of the body and wins over the longer alias
    assert parse_value(definition, 0, tokens).value == "amevalue"


def test_option_falls_through_to_alias_when_separator_fails():
    definition = option("n", "name", opts=SyntaxOptions.HYPHENS | EQUALS)
    tokens = ["--name=value"]
    assert parse_value(definition, 0, tokens).value == "value"


def test_plain_token_never_matches():
    tokens = ["name=value"]
    assert parse_value(option("name", opts=EQUALS), 0, tokens) == ABSENT
    assert parse_value(flag("name"), 0, tokens) == ABSENT
    assert tokens == ["name=value"]


def test_arg_match_representation():
    assert not ABSENT
    assert FLAG_PRESENT
    assert ArgMatch.found("x")
    assert ArgMatch.found("") and ArgMatch.found("").value == ""
    assert repr(ABSENT) == "ArgMatch.ABSENT"
    assert repr(FLAG_PRESENT) == "ArgMatch.FLAG_PRESENT"
    assert repr(ArgMatch.found("x")) == "ArgMatch.found('x')"
