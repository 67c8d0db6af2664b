"""Core domain models used by stack logic."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

MAX_STACK_SIZE = 20
MAX_HISTORY_ITEMS = 10
ANIMATION_STEPS = 25
PEEK_HIGHLIGHT_MS = 3000
PUSH_ARROW_MS = 2000
MIN_SPEED = 1
MAX_SPEED = 10
DEFAULT_SPEED = 5
MAX_STRING_LENGTH = 20
INPUT_PLACEHOLDER = "Enter value"


class ValueKind(StrEnum):
    """Element kinds a stack can be locked to."""

    INTEGER = "Integer"
    CHARACTER = "Character"
    STRING = "String"


class StackError(StrEnum):
    """Recoverable command failures reported to the UI."""

    EMPTY_INPUT = "EMPTY_INPUT"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    PARSE_ERROR = "PARSE_ERROR"
    EMPTY_STACK = "EMPTY_STACK"
    ALREADY_EMPTY = "ALREADY_EMPTY"
    ANIMATION_IN_PROGRESS = "ANIMATION_IN_PROGRESS"
    SPEED_OUT_OF_RANGE = "SPEED_OUT_OF_RANGE"


@dataclass(frozen=True, slots=True)
class StackLimits:
    """Fixed sizing and timing constants of the visualizer."""

    capacity: int = MAX_STACK_SIZE
    history_max: int = MAX_HISTORY_ITEMS
    animation_steps: int = ANIMATION_STEPS
    peek_duration_ms: int = PEEK_HIGHLIGHT_MS
    push_arrow_duration_ms: int = PUSH_ARROW_MS
    speed_range: tuple[int, int] = (MIN_SPEED, MAX_SPEED)


DEFAULT_LIMITS = StackLimits()


@dataclass(frozen=True, slots=True)
class TypedValue:
    """Parsed stack element tagged with its kind.

    Equality compares kind and parsed value; the raw text is kept for display
    only.
    """

    kind: ValueKind
    raw: str = field(compare=False)
    parsed: int | str

    def __str__(self) -> str:
        return format_value(self)


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of a single stack command."""

    value: TypedValue | None = None
    error: StackError | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: TypedValue | None = None, message: str = "") -> OperationResult:
        return cls(value=value, error=None, message=message)

    @classmethod
    def failure(cls, error: StackError, message: str) -> OperationResult:
        return cls(value=None, error=error, message=message)


def format_value(value: TypedValue) -> str:
    """Render a value the way it appears on a stack element."""
    match value.kind:
        case ValueKind.INTEGER:
            return str(int(value.parsed))
        case ValueKind.CHARACTER:
            return str(value.parsed)
        case ValueKind.STRING:
            return str(value.parsed)
