"""Action-id dispatch for controller commands."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

ResultT = TypeVar("ResultT")


@dataclass(frozen=True, slots=True)
class ActionDispatcher(Generic[ResultT]):
    """Resolve and dispatch action ids by direct match or prefix handlers."""

    direct_handlers: dict[str, Callable[[], ResultT]]
    prefixed_handlers: tuple[tuple[str, Callable[[str], ResultT]], ...] = ()

    def dispatch(self, action_id: str) -> ResultT | None:
        """Dispatch action id. Return None when no handler exists."""
        handler = self.direct_handlers.get(action_id)
        if handler is not None:
            return handler()
        for prefix, prefixed_handler in self.prefixed_handlers:
            if action_id.startswith(prefix):
                # Prefix handlers receive the dynamic suffix after their registered prefix.
                suffix = action_id[len(prefix) :]
                return prefixed_handler(suffix)
        return None
