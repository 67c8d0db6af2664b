"""Typed UI command model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CommandType(str, Enum):
    PUSH = "push"
    POP = "pop"
    PEEK = "peek"
    CLEAR = "clear"
    TOGGLE_THEME = "toggle_theme"
    SELECT_KIND = "select_kind"
    SET_SPEED = "set_speed"


@dataclass(frozen=True, slots=True)
class UICommand:
    kind: CommandType
    value: str | None = None

    @property
    def action_id(self) -> str:
        """Dispatcher id: the command name, suffixed with ``:value`` when set."""
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}:{self.value}"
