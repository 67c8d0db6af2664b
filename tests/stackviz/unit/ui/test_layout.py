from stackviz.ui.layout import ELEMENT_HEIGHT, StackLayout, preferred_canvas_height
from stackviz.ui.theme import DARK_THEME, LIGHT_THEME, status_color, theme_for


def test_slots_stack_upwards_from_base() -> None:
    layout = StackLayout(width=600.0, height=700.0)
    bottom = layout.slot_rect(0)
    second = layout.slot_rect(1)
    assert bottom.x == 200.0
    assert bottom.y == 700.0 - ELEMENT_HEIGHT - 20.0
    assert second.y == bottom.y - ELEMENT_HEIGHT
    assert second.h == ELEMENT_HEIGHT


def test_base_and_arrow_geometry() -> None:
    layout = StackLayout(width=600.0, height=700.0)
    base = layout.base_rect()
    assert base.x == layout.left - 30.0
    assert base.w == 260.0
    arrow = layout.push_arrow(2)
    slot = layout.slot_rect(2)
    assert arrow.end_x == slot.x - 20.0
    assert arrow.end_x - arrow.start_x == 30.0
    assert arrow.y == slot.y + ELEMENT_HEIGHT / 2


def test_preferred_canvas_height_grows_with_stack() -> None:
    assert preferred_canvas_height(0) == 600.0
    assert preferred_canvas_height(20) == 22 * ELEMENT_HEIGHT + 40.0


def test_theme_selection() -> None:
    assert theme_for(False) is LIGHT_THEME
    assert theme_for(True) is DARK_THEME
    assert status_color(True, False) != status_color(False, False)
