"""Application controller: command surface and tick driver for the visualizer."""

from __future__ import annotations

import logging

from stackviz.app.commands import UICommand
from stackviz.app.session import VisualizerSession
from stackviz.app.ui_state import (
    AnimationView,
    ButtonStates,
    IndicatorView,
    StackView,
    VisualizerUIState,
)
from stackviz.core.animation import AnimationMode
from stackviz.core.models import OperationResult, StackError, ValueKind
from stackviz.runtime.action_dispatch import ActionDispatcher
from stackviz.runtime.time import StepAccumulator

logger = logging.getLogger(__name__)


class StackController:
    """Validates UI commands, applies them to the session and advances animations."""

    def __init__(self, session: VisualizerSession) -> None:
        self._session = session
        self._now_ms = 0.0
        self._last_tick_ms: float | None = None
        self._steps = StepAccumulator(session.animation.step_delay_ms)
        self._dispatcher: ActionDispatcher[OperationResult] = ActionDispatcher(
            direct_handlers={
                "push": lambda: self.push(""),
                "pop": self.pop,
                "peek": self.peek,
                "clear": self.clear,
                "toggle_theme": self.toggle_theme,
                "select_kind": lambda: self._missing_value(
                    "select_kind", StackError.PARSE_ERROR, "Select a value type"
                ),
                "set_speed": lambda: self._missing_value(
                    "set_speed", StackError.SPEED_OUT_OF_RANGE, "Speed value is required"
                ),
            },
            prefixed_handlers=(
                ("push:", self.push),
                ("select_kind:", self._on_select_kind),
                ("set_speed:", self._on_set_speed),
            ),
        )

    @property
    def session(self) -> VisualizerSession:
        return self._session

    @property
    def now_ms(self) -> float:
        return self._now_ms

    def handle_command(self, command: UICommand) -> OperationResult:
        """Route a typed UI command to its handler."""
        result = self._dispatcher.dispatch(command.action_id)
        if result is None:
            raise ValueError(f"Unhandled command: {command.action_id}")
        return result

    def push(self, raw_input: str, kind: ValueKind | None = None) -> OperationResult:
        session = self._session
        requested = kind if kind is not None else session.selected_kind
        if not session.animation.is_idle():
            return self._reject("push", _busy())
        result = session.engine.try_push(raw_input, requested)
        if not result.ok or result.value is None:
            return self._reject("push", result)

        session.selected_kind = requested
        session.history.append(result.message)
        session.animation.start_push(result.value)
        self._steps.reset()
        session.indicators.arm_push_arrow(self._now_ms, session.engine.size - 1)
        return self._accept("push", result)

    def pop(self) -> OperationResult:
        session = self._session
        if not session.animation.is_idle():
            return self._reject("pop", _busy())
        result = session.engine.try_pop()
        if not result.ok or result.value is None:
            return self._reject("pop", result)

        session.animation.start_pop(result.value)
        self._steps.reset()
        return self._accept(
            "pop", OperationResult.success(result.value, f"Popping: {result.value}")
        )

    def peek(self) -> OperationResult:
        session = self._session
        result = session.engine.peek()
        if not result.ok:
            return self._reject("peek", result)

        session.history.append(result.message)
        session.indicators.arm_peek(self._now_ms, session.engine.size - 1)
        return self._accept("peek", result)

    def clear(self) -> OperationResult:
        session = self._session
        if not session.animation.is_idle():
            return self._reject("clear", _busy())
        result = session.engine.clear()
        if not result.ok:
            return self._reject("clear", result)
        return self._accept("clear", result)

    def set_speed(self, level: int) -> OperationResult:
        low, high = self._session.limits.speed_range
        if not low <= level <= high:
            return self._reject(
                "set_speed",
                OperationResult.failure(
                    StackError.SPEED_OUT_OF_RANGE, f"Speed must be between {low} and {high}"
                ),
            )
        self._session.animation.set_speed(level)
        self._steps.set_step(self._session.animation.step_delay_ms)
        logger.debug(
            "speed_changed level=%d step_delay_ms=%d",
            level,
            self._session.animation.step_delay_ms,
        )
        return OperationResult.success(message=f"Speed: {level}")

    def select_kind(self, kind: ValueKind) -> OperationResult:
        locked = self._session.engine.locked_kind
        if locked is not None and locked is not kind:
            return self._reject(
                "select_kind",
                OperationResult.failure(
                    StackError.TYPE_MISMATCH, f"Stack type locked to {locked.value}"
                ),
            )
        self._session.selected_kind = kind
        return OperationResult.success(message=f"Type: {kind.value}")

    def toggle_theme(self) -> OperationResult:
        self._session.dark_mode = not self._session.dark_mode
        return OperationResult.success(
            message="Dark mode" if self._session.dark_mode else "Light mode"
        )

    def tick(self, now_ms: float) -> bool:
        """Advance indicators and animation to ``now_ms``. Returns whether anything moved."""
        session = self._session
        delta = 0.0 if self._last_tick_ms is None else max(0.0, now_ms - self._last_tick_ms)
        self._last_tick_ms = now_ms
        self._now_ms = max(self._now_ms, now_ms)

        changed = False
        peek_before = session.indicators.peek_active
        arrow_before = session.indicators.push_arrow_active
        session.indicators.tick(self._now_ms)
        if (peek_before, arrow_before) != (
            session.indicators.peek_active,
            session.indicators.push_arrow_active,
        ):
            changed = True

        if session.animation.is_idle():
            self._steps.reset()
            return changed

        mode = session.animation.mode
        subject = session.animation.subject
        for _ in range(self._steps.consume(delta)):
            changed = True
            if session.animation.step():
                self._steps.reset()
                if mode is AnimationMode.POPPING:
                    session.status = f"Popped: {subject}"
                    session.status_is_error = False
                logger.info("animation_complete mode=%s size=%d", mode.value, session.engine.size)
                break
        return changed

    def ui_state(self) -> VisualizerUIState:
        """Return current view-ready state."""
        session = self._session
        engine = session.engine
        animation = session.animation
        indicators = session.indicators
        idle = animation.is_idle()
        return VisualizerUIState(
            stack=StackView(
                elements=engine.elements,
                locked_kind=engine.locked_kind,
                capacity=engine.capacity,
            ),
            animation=AnimationView(
                mode=animation.mode,
                subject=animation.subject,
                progress=animation.progress,
                total_steps=animation.total_steps,
                opacity=animation.opacity,
            ),
            history=session.history.entries,
            indicators=IndicatorView(
                peek_active=indicators.peek_active,
                push_arrow_active=indicators.push_arrow_active,
                peek_slot=indicators.peek.slot_index,
                push_arrow_slot=indicators.push_arrow.slot_index,
            ),
            buttons=ButtonStates(push=idle, pop=idle, peek=True, clear=idle),
            selected_kind=session.selected_kind,
            kind_selector_enabled=engine.locked_kind is None,
            speed=animation.speed,
            dark_mode=session.dark_mode,
            status=session.status,
            status_is_error=session.status_is_error,
        )

    def _on_select_kind(self, value: str) -> OperationResult:
        try:
            kind = ValueKind(value)
        except ValueError:
            return self._reject(
                "select_kind",
                OperationResult.failure(StackError.PARSE_ERROR, f"Unknown type: {value}"),
            )
        return self.select_kind(kind)

    def _on_set_speed(self, value: str) -> OperationResult:
        try:
            level = int(value)
        except ValueError:
            return self._reject(
                "set_speed",
                OperationResult.failure(
                    StackError.SPEED_OUT_OF_RANGE, f"Invalid speed: {value}"
                ),
            )
        return self.set_speed(level)

    def _missing_value(
        self, command: str, error: StackError, message: str
    ) -> OperationResult:
        return self._reject(command, OperationResult.failure(error, message))

    def _accept(self, command: str, result: OperationResult) -> OperationResult:
        self._session.status = result.message
        self._session.status_is_error = False
        logger.info(
            "command_accepted command=%s size=%d",
            command,
            self._session.engine.size,
        )
        return result

    def _reject(self, command: str, result: OperationResult) -> OperationResult:
        self._session.status = result.message
        self._session.status_is_error = True
        logger.info(
            "command_rejected command=%s error=%s",
            command,
            result.error.value if result.error is not None else "unknown",
            extra={"reason": result.message},
        )
        return result


def _busy() -> OperationResult:
    return OperationResult.failure(
        StackError.ANIMATION_IN_PROGRESS, "Wait for the current animation to finish"
    )
