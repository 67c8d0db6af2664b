"""Session context owning all visualizer state."""

from __future__ import annotations

from dataclasses import dataclass

from stackviz.core.animation import AnimationController
from stackviz.core.history import HistoryLog
from stackviz.core.indicators import TransientIndicators
from stackviz.core.models import DEFAULT_LIMITS, DEFAULT_SPEED, StackLimits, TypedValue, ValueKind
from stackviz.core.stack import StackEngine


@dataclass(slots=True)
class VisualizerSession:
    """Aggregates the components and UI selections of one visualizer run."""

    limits: StackLimits
    engine: StackEngine
    history: HistoryLog
    animation: AnimationController
    indicators: TransientIndicators
    selected_kind: ValueKind = ValueKind.INTEGER
    dark_mode: bool = False
    status: str = "Enter a value and press PUSH."
    status_is_error: bool = False


def create_session(
    limits: StackLimits = DEFAULT_LIMITS,
    *,
    speed: int = DEFAULT_SPEED,
    dark_mode: bool = False,
) -> VisualizerSession:
    """Build a session with its components wired together."""
    engine = StackEngine(capacity=limits.capacity)
    history = HistoryLog(max_size=limits.history_max)
    indicators = TransientIndicators(
        peek_duration_ms=limits.peek_duration_ms,
        push_arrow_duration_ms=limits.push_arrow_duration_ms,
    )
    animation = AnimationController(total_steps=limits.animation_steps, speed=speed)

    def _finish_pop(candidate: TypedValue) -> None:
        removed = engine.remove_top()
        history.append(f"Popped: {removed}")

    animation.set_completion_handlers(on_pop_complete=_finish_pop)
    engine.add_clear_listener(history.clear)
    engine.add_clear_listener(indicators.clear)
    return VisualizerSession(
        limits=limits,
        engine=engine,
        history=history,
        animation=animation,
        indicators=indicators,
        dark_mode=dark_mode,
    )
