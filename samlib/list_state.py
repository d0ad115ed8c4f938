"""Filterable, navigable, multi-selectable list of values."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from samlib.events import Value

V = TypeVar("V", bound=Value)


def has_match(needle: str, haystack: str) -> bool:
    """True if every character of ``needle`` appears in ``haystack`` in order, ignoring case."""
    position = 0
    lowered = haystack.lower()
    for ch in needle.lower():
        found = lowered.find(ch, position)
        if found < 0:
            return False
        position = found + 1
    return True


class ListState(Generic[V]):
    """The values on display, the filter that selects them, the cursor and the marks."""

    def __init__(self, values: Iterable[V] = ()) -> None:
        self.values: list[V] = list(values)
        self.current_displayed_values: list[V] = list(self.values)
        self.filter_query = ""
        self._marked: set[V] = set()
        self.highlighted_line: int | None = 0 if self.values else None

    def displayed_values(self) -> list[tuple[bool, V]]:
        """Each displayed value paired with whether it is marked."""
        return [(value in self._marked, value) for value in self.current_displayed_values]

    def up(self) -> None:
        if self.highlighted_line is not None and self.highlighted_line > 0:
            self.highlighted_line -= 1

    def down(self) -> None:
        if (
            self.highlighted_line is not None
            and self.highlighted_line < len(self.current_displayed_values) - 1
        ):
            self.highlighted_line += 1

    def _highlighted(self) -> V | None:
        cursor = self.highlighted_line
        if cursor is None or cursor >= len(self.current_displayed_values):
            return None
        return self.current_displayed_values[cursor]

    def mark(self) -> bool | None:
        """Toggle the mark on the highlighted value; return whether it is now marked."""
        value = self._highlighted()
        if value is None:
            return None
        if value in self._marked:
            self._marked.discard(value)
            return False
        self._marked.add(value)
        return True

    def mark_all(self) -> None:
        self._marked.update(self.current_displayed_values)

    def entr(self) -> bool | None:
        """Mark the highlighted value; return True if it was newly marked."""
        value = self._highlighted()
        if value is None:
            return None
        if value in self._marked:
            return False
        self._marked.add(value)
        return True

    def update_filter(self, c: str) -> None:
        self.filter_query += c
        self._update_display_and_highlight()

    def remove_last_char_from_filter(self) -> None:
        self.filter_query = self.filter_query[:-1]
        self._update_display_and_highlight()

    def search_filter(self) -> str:
        return self.filter_query

    def marked_values(self) -> set[V]:
        return set(self._marked)

    def _update_display_and_highlight(self) -> None:
        self.current_displayed_values = [
            value for value in self.values if has_match(self.filter_query, value.text())
        ]
        count = len(self.current_displayed_values)
        cursor = self.highlighted_line
        if cursor is not None and cursor < count:
            return
        self.highlighted_line = 0 if count else None