from scene.controls import CONTROLS
from ui.layout import ControlPanelLayout


def _layout() -> ControlPanelLayout:
    return ControlPanelLayout((1280, 720), [name for name, _ in CONTROLS])


def test_every_control_gets_a_button() -> None:
    rects = _layout().button_rects
    assert list(rects) == [name for name, _ in CONTROLS]
    tops = [rect.top for rect in rects.values()]
    assert tops == sorted(tops)


def test_button_at_hits_and_misses() -> None:
    layout = _layout()
    first = layout.button_rects["changeColor"]
    assert layout.button_at(first.center) == "changeColor"
    # Gap between the first two buttons.
    assert layout.button_at((first.centerx, first.bottom + 2)) is None
    assert layout.button_at((900, 500)) is None


def test_panel_covers_buttons() -> None:
    layout = _layout()
    for rect in layout.button_rects.values():
        assert layout.panel_rect.contains(rect)
    assert layout.is_in_panel(layout.button_rects["resetScene"].center)
    assert not layout.is_in_panel((1000, 600))
