"""Terminal rendering of the modal selector."""

from __future__ import annotations

import shutil
import sys
import textwrap
import time
from dataclasses import dataclass
from typing import TextIO

from samlib.options_state import OptionsState
from samlib.view_state import ViewMode, ViewState

MIN_TIME_TO_REFRESH = 0.075
_FILTER_MIN_HEIGHT = 8
_HIGHLIGHT_SYMBOL = "➺ "

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class UITheme:
    background: RGB = (38, 38, 38)
    foreground: RGB = (209, 208, 208)
    highlight: RGB = (87, 85, 127)
    borders: RGB = (104, 134, 209)


@dataclass(frozen=True)
class _Style:
    fg: RGB
    bg: RGB
    italic: bool = False

    def sgr(self) -> str:
        fg = ";".join(map(str, self.fg))
        bg = ";".join(map(str, self.bg))
        italic = ";3" if self.italic else ""
        return f"\x1b[0;38;2;{fg};48;2;{bg}{italic}m"


def _base_style(theme: UITheme) -> _Style:
    return _Style(theme.foreground, theme.background)


def _highlight_style(theme: UITheme) -> _Style:
    return _Style(theme.highlight, theme.foreground, italic=True)


def _border_style(theme: UITheme) -> _Style:
    return _Style(theme.borders, theme.background)


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    def _inner(self) -> Rect:
        return Rect(self.x + 1, self.y + 1, max(0, self.width - 2), max(0, self.height - 2))


@dataclass(frozen=True)
class InsertModeLayout:
    """Areas of the insert-mode screen: list and filter on the left, preview on the right."""

    list_chunk: Rect
    filter_chunk: Rect
    preview_chunk: Rect

    @classmethod
    def from_area(cls, area: Rect) -> InsertModeLayout:
        left_width = area.width * 50 // 100
        right_width = area.width - left_width
        filter_height = min(
            area.height,
            max(_FILTER_MIN_HEIGHT, area.height - area.height * 92 // 100),
        )
        list_height = area.height - filter_height
        return cls(
            list_chunk=Rect(area.x, area.y, left_width, list_height),
            filter_chunk=Rect(area.x, area.y + list_height, left_width, filter_height),
            preview_chunk=Rect(area.x + left_width, area.y, right_width, area.height),
        )


def list_item_lines(state: ViewState) -> list[str]:
    """The displayed values as list lines, marked ones flagged."""
    return [
        f"❄ {value.text()}" if marked else f"  {value.text()}"
        for marked, value in state.list.displayed_values()
    ]


def options_text(options: OptionsState) -> str:
    """One line per option with its key, state and label."""
    return "".join(
        f"➺ {'⌘' if option.active else ' '} ({option.key}) : {option.text}\n"
        for option in options.options
    )


class _Canvas:
    def __init__(self, width: int, height: int, style: _Style) -> None:
        self.width = width
        self.height = height
        self._cells = [[(" ", style)] * width for _ in range(height)]

    def fill(self, rect: Rect, style: _Style) -> None:
        for y in range(max(0, rect.y), min(self.height, rect.y + rect.height)):
            for x in range(max(0, rect.x), min(self.width, rect.x + rect.width)):
                self._cells[y][x] = (" ", style)

    def put(self, x: int, y: int, text: str, style: _Style, right: int) -> None:
        if not 0 <= y < self.height:
            return
        limit = min(self.width, right)
        for offset, ch in enumerate(text):
            column = x + offset
            if column >= limit:
                break
            if column >= 0:
                self._cells[y][column] = (ch, style)

    def render(self) -> str:
        parts = []
        for row_index, row in enumerate(self._cells):
            parts.append(f"\x1b[{row_index + 1};1H")
            current = None
            for ch, style in row:
                if style != current:
                    parts.append(style.sgr())
                    current = style
                parts.append(ch)
            parts.append("\x1b[0m")
        return "".join(parts)


def _draw_block(canvas: _Canvas, rect: Rect, title: str, theme: UITheme) -> None:
    if rect.width < 2 or rect.height < 2:
        return
    border = _border_style(theme)
    right = rect.x + rect.width
    bottom = rect.y + rect.height - 1
    span = "─" * (rect.width - 2)
    canvas.put(rect.x, rect.y, f"╭{span}╮", border, right)
    for y in range(rect.y + 1, bottom):
        canvas.put(rect.x, y, "│", border, right)
        canvas.put(right - 1, y, "│", border, right)
    canvas.put(rect.x, bottom, f"╰{span}╯", border, right)
    canvas.put(rect.x + 1, rect.y, title[: rect.width - 2], _base_style(theme), right - 1)


def _wrap(text: str, width: int) -> list[str]:
    if width <= 0:
        return []
    lines: list[str] = []
    for raw in text.split("\n"):
        lines.extend(textwrap.wrap(raw, width) or [""])
    return lines


def _draw_paragraph(canvas: _Canvas, rect: Rect, title: str, text: str, theme: UITheme) -> None:
    style = _base_style(theme)
    canvas.fill(rect, style)
    _draw_block(canvas, rect, title, theme)
    inner = rect._inner()
    for offset, line in enumerate(_wrap(text, inner.width)[: inner.height]):
        canvas.put(inner.x, inner.y + offset, line, style, inner.x + inner.width)


def _draw_list(
    canvas: _Canvas, rect: Rect, items: list[str], selected: int | None, theme: UITheme
) -> None:
    base = _base_style(theme)
    highlight = _highlight_style(theme)
    canvas.fill(rect, base)
    _draw_block(canvas, rect, "Choices", theme)
    inner = rect._inner()
    if inner.height <= 0 or inner.width <= 0:
        return
    right = inner.x + inner.width
    offset = 0 if selected is None else max(0, selected - inner.height + 1)
    blank = " " * len(_HIGHLIGHT_SYMBOL) if selected is not None else ""
    for row, item in enumerate(items[offset : offset + inner.height]):
        y = inner.y + row
        if offset + row == selected:
            canvas.fill(Rect(inner.x, y, inner.width, 1), highlight)
            canvas.put(inner.x, y, _HIGHLIGHT_SYMBOL + item, highlight, right)
        else:
            canvas.put(inner.x, y, blank + item, base, right)


class UIModal:
    """Draws a view state to a terminal stream, at most once every 75 ms."""

    def __init__(self, screen: TextIO | None = None, theme: UITheme | None = None) -> None:
        self.screen = screen if screen is not None else sys.stdout
        self.theme = theme if theme is not None else UITheme()
        self._last_update: float | None = None

    def draw(self, state: ViewState) -> bool:
        """Render ``state``; return False if skipped because the last frame is too recent."""
        if not self._enough_time_since_last_refresh():
            return False
        size = shutil.get_terminal_size()
        area = Rect(0, 0, size.columns, size.lines)
        canvas = _Canvas(area.width, area.height, _base_style(self.theme))
        if state.current_mode is ViewMode.OPTIONS_MODE:
            _draw_paragraph(canvas, area, "Options", options_text(state.options), self.theme)
        else:
            layout = InsertModeLayout.from_area(area)
            _draw_list(
                canvas,
                layout.list_chunk,
                list_item_lines(state),
                state.list.highlighted_line,
                self.theme,
            )
            _draw_paragraph(
                canvas, layout.filter_chunk, "Filter", state.search_filter(), self.theme
            )
            _draw_paragraph(
                canvas, layout.preview_chunk, "Preview", state.preview() or "", self.theme
            )
        self.screen.write(canvas.render())
        self.screen.flush()
        return True

    def _enough_time_since_last_refresh(self) -> bool:
        now = time.monotonic()
        if self._last_update is None or now - self._last_update >= MIN_TIME_TO_REFRESH:
            self._last_update = now
            return True
        return False