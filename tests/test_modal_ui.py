import io
import re
from unittest.mock import patch

import pytest

from samlib.events import Event, EventKind, MockValue, input_char
from samlib.modal_ui import (
    InsertModeLayout,
    Rect,
    UIModal,
    UITheme,
    list_item_lines,
    options_text,
)
from samlib.options_state import OptionToggle, OptionsState
from samlib.view_state import ViewState

_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")
_ROW = re.compile(r"\x1b\[\d+;1H")


@pytest.fixture
def terminal(monkeypatch):
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setenv("LINES", "24")


def _state():
    return ViewState([MockValue(1, "alpha"), MockValue(2, "beta")])


def test_theme_defaults():
    theme = UITheme()
    assert theme.foreground == (209, 208, 208)
    assert theme.background == (38, 38, 38)
    assert theme.highlight == (87, 85, 127)
    assert theme.borders == (104, 134, 209)


@pytest.mark.parametrize("width, height", [(80, 24), (81, 50), (10, 9), (3, 2)])
def test_layout_tiles_area(width, height):
    area = Rect(0, 0, width, height)
    layout = InsertModeLayout.from_area(area)
    assert layout.list_chunk.height + layout.filter_chunk.height == height
    assert layout.list_chunk.width + layout.preview_chunk.width == width
    assert layout.filter_chunk.y == layout.list_chunk.y + layout.list_chunk.height
    assert layout.preview_chunk.x == layout.list_chunk.width
    assert layout.preview_chunk.height == height
    assert layout.filter_chunk.height == min(height, max(8, layout.filter_chunk.height))


def test_list_item_lines_flags_marked_values():
    state = _state()
    state.update(Event(EventKind.MARK))
    assert list_item_lines(state) == ["❄ alpha", "  beta"]


def test_list_item_lines_follow_filter():
    state = _state()
    state.update(input_char("b"))
    assert list_item_lines(state) == ["  beta"]


def test_options_text():
    options = OptionsState(
        [OptionToggle(key="o", text="option", active=True), OptionToggle(key="n", text="not option")]
    )
    assert options_text(options) == "➺ ⌘ (o) : option\n➺   (n) : not option\n"


def test_draw_fills_every_row(terminal):
    screen = io.StringIO()
    UIModal(screen).draw(_state())
    rows = _ROW.split(screen.getvalue())[1:]
    assert len(rows) == 24
    assert all(len(_ESCAPE.sub("", row)) == 80 for row in rows)


def test_draw_options_mode(terminal):
    state = ViewState([MockValue(1, "alpha")], [OptionToggle(key="o", text="option")])
    state.update(Event(EventKind.TOGGLE_VIEW_MODE))
    screen = io.StringIO()
    UIModal(screen).draw(state)
    plain = _ESCAPE.sub("", screen.getvalue())
    assert "Options" in plain
    assert "(o) : option" in plain
    assert "Choices" not in plain


def test_draw_empty_state(terminal):
    screen = io.StringIO()
    assert UIModal(screen).draw(ViewState()) is True
    assert "Preview" in _ESCAPE.sub("", screen.getvalue())


def test_draw_tiny_terminal(monkeypatch):
    monkeypatch.setenv("COLUMNS", "3")
    monkeypatch.setenv("LINES", "2")
    screen = io.StringIO()
    assert UIModal(screen).draw(_state()) is True
    assert len(_ROW.split(screen.getvalue())[1:]) == 2


def test_draw_is_throttled(terminal):
    screen = io.StringIO()
    ui = UIModal(screen)
    with patch("samlib.modal_ui.time.monotonic", side_effect=[0.0, 0.01, 0.2]):
        results = [ui.draw(_state()) for _ in range(3)]
    assert results == [True, False, True]
    assert screen.getvalue().count("Choices") == 2