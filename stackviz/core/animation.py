"""Tick-driven push/pop animation state machine."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from stackviz.core.models import ANIMATION_STEPS, DEFAULT_SPEED, MAX_SPEED, MIN_SPEED, TypedValue

MIN_STEP_DELAY_MS = 10


class AnimationMode(StrEnum):
    """Visible animation phase."""

    IDLE = "IDLE"
    PUSHING = "PUSHING"
    POPPING = "POPPING"


@dataclass(frozen=True, slots=True)
class Idle:
    """No animation in flight."""


@dataclass(frozen=True, slots=True)
class PendingPush:
    """Push fade-in for a value already on the stack."""

    value: TypedValue


@dataclass(frozen=True, slots=True)
class PendingPop:
    """Pop fade-out for a value removed when the animation completes."""

    value: TypedValue


PendingOperation = Idle | PendingPush | PendingPop


def step_delay_for_speed(level: int) -> int:
    """Map a speed level to the delay between animation steps in ms."""
    if not MIN_SPEED <= level <= MAX_SPEED:
        raise ValueError(f"speed must be in [{MIN_SPEED}, {MAX_SPEED}], got {level}")
    return max(MIN_STEP_DELAY_MS, 50 - 4 * level)


class AnimationController:
    """Drives a discrete progress counter for a single in-flight animation.

    Re-entrancy is not handled here: callers must check ``is_idle`` before
    starting a new animation. There is no cancellation; a started animation
    always runs to ``total_steps``.
    """

    def __init__(
        self,
        *,
        total_steps: int = ANIMATION_STEPS,
        speed: int = DEFAULT_SPEED,
        on_pop_complete: Callable[[TypedValue], None] | None = None,
        on_push_complete: Callable[[TypedValue], None] | None = None,
    ) -> None:
        if total_steps <= 0:
            raise ValueError("total_steps must be > 0")
        self._total_steps = total_steps
        self._speed = speed
        self._step_delay_ms = step_delay_for_speed(speed)
        self._pending: PendingOperation = Idle()
        self._progress = 0
        self._on_pop_complete = on_pop_complete
        self._on_push_complete = on_push_complete

    @property
    def total_steps(self) -> int:
        return self._total_steps

    @property
    def progress(self) -> int:
        return self._progress

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def step_delay_ms(self) -> int:
        return self._step_delay_ms

    @property
    def pending(self) -> PendingOperation:
        return self._pending

    @property
    def mode(self) -> AnimationMode:
        match self._pending:
            case Idle():
                return AnimationMode.IDLE
            case PendingPush():
                return AnimationMode.PUSHING
            case PendingPop():
                return AnimationMode.POPPING
        raise AssertionError(f"unknown pending operation {self._pending!r}")

    @property
    def subject(self) -> TypedValue | None:
        match self._pending:
            case PendingPush(value=value) | PendingPop(value=value):
                return value
        return None

    @property
    def opacity(self) -> float:
        """Opacity of the animated element for the current progress."""
        fraction = self._progress / self._total_steps
        match self._pending:
            case PendingPush():
                return math.sin(fraction * math.pi / 2)
            case PendingPop():
                return 1.0 - fraction
        return 1.0

    def is_idle(self) -> bool:
        return isinstance(self._pending, Idle)

    def set_completion_handlers(
        self,
        *,
        on_pop_complete: Callable[[TypedValue], None] | None = None,
        on_push_complete: Callable[[TypedValue], None] | None = None,
    ) -> None:
        self._on_pop_complete = on_pop_complete
        self._on_push_complete = on_push_complete

    def set_speed(self, level: int) -> None:
        """Change speed; the new delay applies from the next tick."""
        self._step_delay_ms = step_delay_for_speed(level)
        self._speed = level

    def start_push(self, value: TypedValue) -> None:
        self._start(PendingPush(value))

    def start_pop(self, candidate: TypedValue) -> None:
        self._start(PendingPop(candidate))

    def step(self) -> bool:
        """Advance one step. Returns whether this step finished the animation."""
        if self.is_idle():
            return False
        self._progress = min(self._progress + 1, self._total_steps)
        if self._progress < self._total_steps:
            return False
        self._complete()
        return True

    def _start(self, pending: PendingOperation) -> None:
        if not self.is_idle():
            raise RuntimeError(f"Animation already in progress: {self.mode.value}")
        self._pending = pending
        self._progress = 0

    def _complete(self) -> None:
        finished = self._pending
        match finished:
            case PendingPop(value=value):
                if self._on_pop_complete is not None:
                    self._on_pop_complete(value)
            case PendingPush(value=value):
                if self._on_push_complete is not None:
                    self._on_push_complete(value)
        self._pending = Idle()
        self._progress = 0
