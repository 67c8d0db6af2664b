"""Time-boxed highlight flags read by the renderer."""

from __future__ import annotations

from dataclasses import dataclass

from stackviz.core.models import PEEK_HIGHLIGHT_MS, PUSH_ARROW_MS


@dataclass(slots=True)
class Indicator:
    """Single expiring flag anchored to a stack slot."""

    duration_ms: float
    active: bool = False
    expiry_ms: float = 0.0
    slot_index: int | None = None

    def arm(self, now_ms: float, slot_index: int | None = None) -> None:
        """Activate until ``now_ms + duration_ms``; re-arming resets the deadline."""
        self.active = True
        self.expiry_ms = now_ms + self.duration_ms
        self.slot_index = slot_index

    def tick(self, now_ms: float) -> bool:
        """Expire the flag if its deadline has passed. Returns whether it expired."""
        if self.active and now_ms >= self.expiry_ms:
            self.reset()
            return True
        return False

    def reset(self) -> None:
        self.active = False
        self.expiry_ms = 0.0
        self.slot_index = None


class TransientIndicators:
    """Peek highlight and push arrow timers.

    Each indicator is independent; the latest arm wins. Nothing here touches
    stack state.
    """

    def __init__(
        self,
        *,
        peek_duration_ms: float = PEEK_HIGHLIGHT_MS,
        push_arrow_duration_ms: float = PUSH_ARROW_MS,
    ) -> None:
        self.peek = Indicator(duration_ms=peek_duration_ms)
        self.push_arrow = Indicator(duration_ms=push_arrow_duration_ms)

    @property
    def peek_active(self) -> bool:
        return self.peek.active

    @property
    def push_arrow_active(self) -> bool:
        return self.push_arrow.active

    def arm_peek(self, now_ms: float, slot_index: int | None = None) -> None:
        self.peek.arm(now_ms, slot_index)

    def arm_push_arrow(self, now_ms: float, slot_index: int | None = None) -> None:
        self.push_arrow.arm(now_ms, slot_index)

    def tick(self, now_ms: float) -> None:
        self.peek.tick(now_ms)
        self.push_arrow.tick(now_ms)

    def clear(self) -> None:
        self.peek.reset()
        self.push_arrow.reset()
