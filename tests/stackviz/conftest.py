from __future__ import annotations

from collections.abc import Callable

import pytest

from stackviz.app.controller import StackController
from stackviz.app.session import VisualizerSession, create_session
from stackviz.core.models import StackLimits


@pytest.fixture
def session() -> VisualizerSession:
    return create_session()


@pytest.fixture
def controller(session: VisualizerSession) -> StackController:
    controller = StackController(session)
    controller.tick(0.0)
    return controller


def advance_steps(controller: StackController, steps: int) -> None:
    """Tick forward exactly ``steps`` animation steps at the current speed."""
    delay = controller.session.animation.step_delay_ms
    now = controller.now_ms
    for _ in range(steps):
        now += delay
        controller.tick(now)


def finish_animation(controller: StackController) -> None:
    advance_steps(controller, controller.session.limits.animation_steps)


@pytest.fixture
def advance() -> Callable[[StackController, int], None]:
    return advance_steps


@pytest.fixture
def finish() -> Callable[[StackController], None]:
    return finish_animation


@pytest.fixture
def small_limits() -> StackLimits:
    return StackLimits(capacity=3, history_max=2, animation_steps=4)
