"""Typed, read-only view state exposed by the controller."""

from __future__ import annotations

from dataclasses import dataclass

from stackviz.core.animation import AnimationMode
from stackviz.core.models import TypedValue, ValueKind


@dataclass(frozen=True, slots=True)
class StackView:
    """Stack contents bottom to top."""

    elements: tuple[TypedValue, ...]
    locked_kind: ValueKind | None
    capacity: int

    @property
    def size(self) -> int:
        return len(self.elements)


@dataclass(frozen=True, slots=True)
class AnimationView:
    """Current animation phase and progress."""

    mode: AnimationMode
    subject: TypedValue | None
    progress: int
    total_steps: int
    opacity: float


@dataclass(frozen=True, slots=True)
class IndicatorView:
    """Highlight flags with the slot they point at."""

    peek_active: bool
    push_arrow_active: bool
    peek_slot: int | None = None
    push_arrow_slot: int | None = None


@dataclass(frozen=True, slots=True)
class ButtonStates:
    """Enablement of the command buttons."""

    push: bool
    pop: bool
    peek: bool
    clear: bool


@dataclass(frozen=True, slots=True)
class VisualizerUIState:
    """View-ready state snapshot."""

    stack: StackView
    animation: AnimationView
    history: tuple[str, ...]
    indicators: IndicatorView
    buttons: ButtonStates
    selected_kind: ValueKind
    kind_selector_enabled: bool
    speed: int
    dark_mode: bool
    status: str
    status_is_error: bool

    @property
    def operation_label(self) -> str:
        return f"Operations: {self.stack.size}"
