"""Input parsing for stack values."""

from __future__ import annotations

import re
from dataclasses import dataclass

from stackviz.core.models import (
    INPUT_PLACEHOLDER,
    MAX_STRING_LENGTH,
    StackError,
    TypedValue,
    ValueKind,
)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Parsed value or the reason parsing failed."""

    value: TypedValue | None
    error: StackError | None = None
    message: str = ""


def normalize_input(raw_input: str) -> str:
    """Strip whitespace and map the placeholder text to empty input."""
    text = raw_input.strip()
    if text == INPUT_PLACEHOLDER:
        return ""
    return text


def is_blank_input(raw_input: str) -> bool:
    """Return whether input is empty once normalized."""
    return normalize_input(raw_input) == ""


def parse_value(raw_input: str, kind: ValueKind) -> ParseOutcome:
    """Parse raw input text against the requested kind."""
    text = normalize_input(raw_input)
    if not text:
        return ParseOutcome(None, StackError.EMPTY_INPUT, "Please enter a value")

    match kind:
        case ValueKind.INTEGER:
            return _parse_integer(text)
        case ValueKind.CHARACTER:
            if _utf16_length(text) != 1:
                return ParseOutcome(
                    None, StackError.PARSE_ERROR, "Please enter exactly one character"
                )
            return ParseOutcome(TypedValue(kind, text, text))
        case ValueKind.STRING:
            if _utf16_length(text) > MAX_STRING_LENGTH:
                return ParseOutcome(
                    None,
                    StackError.PARSE_ERROR,
                    f"String too long (max {MAX_STRING_LENGTH} chars)",
                )
            return ParseOutcome(TypedValue(kind, text, text))


def _parse_integer(text: str) -> ParseOutcome:
    # Whole decimal numbers only; int() alone would also take "1_000" and " 7".
    if _INTEGER_PATTERN.fullmatch(text) is None:
        return ParseOutcome(None, StackError.PARSE_ERROR, "Invalid integer format")
    number = int(text)
    if not _INT32_MIN <= number <= _INT32_MAX:
        return ParseOutcome(None, StackError.PARSE_ERROR, "Invalid integer format")
    return ParseOutcome(TypedValue(ValueKind.INTEGER, text, number))


def _utf16_length(text: str) -> int:
    # Lengths are counted in UTF-16 code units; astral characters count twice.
    return len(text.encode("utf-16-le")) // 2
