"""Light and dark color palettes for the visualizer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Theme:
    window_bg: str
    element_bg: str
    element_border: str
    text: str
    accent: str
    base_border: str
    title_bg: str
    peek_highlight: str
    shadow: str


ACCENT = "#6495ed"
DARK_ACCENT = "#50fa7b"
PEEK_COLOR = "#ffc107"

BUTTON_COLORS: dict[str, str] = {
    "push": ACCENT,
    "pop": "#dc3545",
    "peek": PEEK_COLOR,
    "clear": "#6c757d",
    "toggle_theme": "#20c997",
}

LIGHT_THEME = Theme(
    window_bg="#f5f5f5",
    element_bg="#dcdcdc",
    element_border="#808080",
    text="#000000",
    accent=ACCENT,
    base_border="#c0c0c0",
    title_bg=ACCENT,
    peek_highlight="#96ffd700",
    shadow="#32000000",
)

DARK_THEME = Theme(
    window_bg="#282a36",
    element_bg="#44475a",
    element_border="#404040",
    text="#ffffff",
    accent=DARK_ACCENT,
    base_border="#404040",
    title_bg=DARK_ACCENT,
    peek_highlight="#96ffd700",
    shadow="#32000000",
)


def theme_for(dark_mode: bool) -> Theme:
    return DARK_THEME if dark_mode else LIGHT_THEME


def status_color(is_error: bool, dark_mode: bool) -> str:
    if is_error:
        return "#f87171" if dark_mode else "#b91c1c"
    return "#86efac" if dark_mode else "#166534"
