"""Bounded, kind-locked stack state and its mutation helpers."""

from __future__ import annotations

from collections.abc import Callable

from stackviz.core.models import (
    MAX_STACK_SIZE,
    OperationResult,
    StackError,
    TypedValue,
    ValueKind,
)
from stackviz.core.parsing import is_blank_input, parse_value


class StackEngine:
    """Owns stack elements and enforces capacity and type-lock rules.

    Elements are stored bottom to top. ``locked_kind`` is set by the first
    push and released exactly when the stack becomes empty again.
    """

    def __init__(self, capacity: int = MAX_STACK_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._capacity = capacity
        self._elements: list[TypedValue] = []
        self._locked_kind: ValueKind | None = None
        self._clear_listeners: list[Callable[[], None]] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def elements(self) -> tuple[TypedValue, ...]:
        return tuple(self._elements)

    @property
    def locked_kind(self) -> ValueKind | None:
        return self._locked_kind

    @property
    def size(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        return not self._elements

    def is_full(self) -> bool:
        return len(self._elements) >= self._capacity

    def add_clear_listener(self, listener: Callable[[], None]) -> None:
        """Register a callback run after every successful clear."""
        self._clear_listeners.append(listener)

    def try_push(self, raw_input: str, requested_kind: ValueKind) -> OperationResult:
        """Validate, parse and append a value."""
        if is_blank_input(raw_input):
            return OperationResult.failure(StackError.EMPTY_INPUT, "Please enter a value")
        if self.is_full():
            return OperationResult.failure(
                StackError.CAPACITY_EXCEEDED,
                f"Stack overflow - maximum size reached ({self._capacity})",
            )
        parsed = parse_value(raw_input, requested_kind)
        if parsed.value is None:
            error = parsed.error or StackError.PARSE_ERROR
            return OperationResult.failure(error, parsed.message)
        if self._locked_kind is not None and self._locked_kind is not requested_kind:
            return OperationResult.failure(
                StackError.TYPE_MISMATCH, f"Stack type locked to {self._locked_kind.value}"
            )

        self._elements.append(parsed.value)
        if self._locked_kind is None:
            self._locked_kind = requested_kind
        return OperationResult.success(parsed.value, f"Pushed: {parsed.value}")

    def try_pop(self) -> OperationResult:
        """Return the top value as pop candidate without removing it."""
        if not self._elements:
            return OperationResult.failure(StackError.EMPTY_STACK, "Stack is empty")
        return OperationResult.success(self._elements[-1])

    def peek(self) -> OperationResult:
        """Return the top value without mutation."""
        if not self._elements:
            return OperationResult.failure(StackError.EMPTY_STACK, "Stack is empty")
        top = self._elements[-1]
        return OperationResult.success(top, f"Peeked: {top}")

    def remove_top(self) -> TypedValue:
        """Remove and return the top value, releasing the lock when emptied."""
        if not self._elements:
            raise ValueError("Cannot remove from an empty stack.")
        removed = self._elements.pop()
        if not self._elements:
            self._locked_kind = None
        return removed

    def clear(self) -> OperationResult:
        """Empty the stack and notify clear listeners."""
        if not self._elements:
            return OperationResult.failure(StackError.ALREADY_EMPTY, "Stack is already empty")
        self._elements.clear()
        self._locked_kind = None
        for listener in self._clear_listeners:
            listener()
        return OperationResult.success(message="Stack cleared")
