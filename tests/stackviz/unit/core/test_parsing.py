import pytest

from stackviz.core.models import StackError, ValueKind
from stackviz.core.parsing import is_blank_input, normalize_input, parse_value


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("5", 5), ("  42 ", 42), ("-12", -12), ("+3", 3), ("2147483647", 2**31 - 1)],
)
def test_parse_integer_accepts_whole_numbers(raw: str, expected: int) -> None:
    outcome = parse_value(raw, ValueKind.INTEGER)
    assert outcome.error is None
    assert outcome.value is not None
    assert outcome.value.parsed == expected
    assert outcome.value.kind is ValueKind.INTEGER


@pytest.mark.parametrize("raw", ["abc", "1.5", "1_000", "12a", "2147483648", "-2147483649", "--1"])
def test_parse_integer_rejects_malformed_input(raw: str) -> None:
    outcome = parse_value(raw, ValueKind.INTEGER)
    assert outcome.value is None
    assert outcome.error is StackError.PARSE_ERROR
    assert outcome.message == "Invalid integer format"


def test_parse_character_requires_exactly_one_char() -> None:
    assert parse_value("ab", ValueKind.CHARACTER).error is StackError.PARSE_ERROR
    outcome = parse_value("a", ValueKind.CHARACTER)
    assert outcome.value is not None
    assert outcome.value.parsed == "a"


def test_parse_string_length_limit() -> None:
    assert parse_value("x" * 20, ValueKind.STRING).value is not None
    too_long = parse_value("x" * 21, ValueKind.STRING)
    assert too_long.error is StackError.PARSE_ERROR
    assert "max 20" in too_long.message


def test_lengths_count_astral_characters_as_two_units() -> None:
    assert parse_value("\N{GRINNING FACE}", ValueKind.CHARACTER).error is StackError.PARSE_ERROR
    assert parse_value("\N{LATIN SMALL LETTER E WITH ACUTE}", ValueKind.CHARACTER).value is not None
    assert parse_value("\N{GRINNING FACE}" * 10, ValueKind.STRING).value is not None
    assert parse_value("x" + "\N{GRINNING FACE}" * 10, ValueKind.STRING).error is (
        StackError.PARSE_ERROR
    )


def test_blank_and_placeholder_input_is_empty() -> None:
    assert is_blank_input("")
    assert is_blank_input("   ")
    assert is_blank_input("Enter value")
    assert normalize_input("  hi ") == "hi"
    assert parse_value(" ", ValueKind.STRING).error is StackError.EMPTY_INPUT
