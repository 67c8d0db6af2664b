"""Tick timing primitives for the visualizer loop."""

from __future__ import annotations

from collections.abc import Callable
from time import monotonic


class TickClock:
    """Monotonic millisecond clock with bounded tick deltas."""

    def __init__(
        self,
        *,
        time_source: Callable[[], float] | None = None,
        max_delta_ms: float = 250.0,
    ) -> None:
        self._time_source = time_source or monotonic
        self._max_delta_ms = max_delta_ms
        self._last_seconds: float | None = None
        self._elapsed_ms = 0.0

    def next(self) -> float:
        """Advance the clock and return elapsed milliseconds."""
        now = self._time_source()
        if self._last_seconds is None:
            delta = 0.0
        else:
            raw_delta = (now - self._last_seconds) * 1000.0
            delta = min(max(0.0, raw_delta), self._max_delta_ms)
        self._last_seconds = now
        self._elapsed_ms += delta
        return self._elapsed_ms


class StepAccumulator:
    """Accumulates variable deltas into fixed-step counts.

    The step length can change between calls; time already accumulated is
    rescaled to the same fraction of the new step.
    """

    def __init__(self, step_ms: float, *, max_steps_per_tick: int = 8) -> None:
        if max_steps_per_tick <= 0:
            raise ValueError("max_steps_per_tick must be > 0")
        self._step_ms = _validated_step(step_ms)
        self._max_steps_per_tick = max_steps_per_tick
        self._accumulated_ms = 0.0

    @property
    def step_ms(self) -> float:
        return self._step_ms

    def set_step(self, step_ms: float) -> None:
        new_step = _validated_step(step_ms)
        self._accumulated_ms *= new_step / self._step_ms
        self._step_ms = new_step

    def reset(self) -> None:
        self._accumulated_ms = 0.0

    def consume(self, delta_ms: float) -> int:
        """Return number of fixed steps to execute for this tick."""
        if delta_ms < 0.0:
            raise ValueError("delta_ms must be >= 0")
        self._accumulated_ms += delta_ms
        steps = int(self._accumulated_ms // self._step_ms)
        bounded_steps = min(steps, self._max_steps_per_tick)
        self._accumulated_ms -= bounded_steps * self._step_ms
        if bounded_steps < steps:
            # Drop backlog beyond the per-tick bound instead of replaying it later.
            self._accumulated_ms = min(self._accumulated_ms, self._step_ms)
        return bounded_steps


def _validated_step(step_ms: float) -> float:
    if step_ms <= 0.0:
        raise ValueError("step_ms must be > 0")
    return float(step_ms)
