"""Input events for the modal selector and the values it lists."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass


class EventKind(enum.Enum):
    APP_CLOSED = "app_closed"
    TOGGLE_VIEW_MODE = "toggle_view_mode"
    INPUT_CHAR = "input_char"
    BACKSPACE = "backspace"
    ENTR = "entr"
    UP = "up"
    DOWN = "down"
    MARK = "mark"
    MARK_ALL = "mark_all"


@dataclass(frozen=True)
class Event:
    """A user action; ``char`` is set only for ``INPUT_CHAR`` events."""

    kind: EventKind
    char: str | None = None


def input_char(c: str) -> Event:
    """Build the event for typing the single character ``c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return Event(EventKind.INPUT_CHAR, c)


class Value(ABC):
    """An item that can be listed, filtered and previewed.

    Implementations must be hashable and comparable for equality.
    """

    @abstractmethod
    def text(self) -> str:
        """The line shown in the list and matched by the filter."""

    @abstractmethod
    def preview(self) -> str:
        """The text shown in the preview pane."""


@dataclass(frozen=True)
class MockValue(Value):
    """A simple value made of an id and a message."""

    id: int
    msg: str

    def text(self) -> str:
        return self.msg

    def preview(self) -> str:
        return self.msg