"""State machine behind the modal selector: list, options and current mode."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, TypeVar

from samlib.events import Event, EventKind, Value
from samlib.list_state import ListState
from samlib.options_state import OptionToggle, OptionsState

V = TypeVar("V", bound=Value)


class ViewMode(enum.Enum):
    OPTIONS_MODE = "options"
    INSERT_MODE = "insert"

    def toggle(self) -> ViewMode:
        if self is ViewMode.INSERT_MODE:
            return ViewMode.OPTIONS_MODE
        return ViewMode.INSERT_MODE


class ExecutionState(enum.Enum):
    KEEP = "keep"
    EXIT_SUCCESS = "exit_success"
    CANCELLED = "cancelled"


@dataclass
class ViewResponse(Generic[V]):
    marked_values: set[V] = field(default_factory=set)
    selected_options: list[OptionToggle] = field(default_factory=list)

    def values(self) -> Iterator[V]:
        return iter(self.marked_values)


class ViewState(Generic[V]):
    def __init__(
        self, values: Iterable[V] = (), options: Iterable[OptionToggle] = ()
    ) -> None:
        self.current_mode = ViewMode.INSERT_MODE
        self.list: ListState[V] = ListState(values)
        self.options = OptionsState(list(options))

    def preview(self) -> str | None:
        """Preview of the highlighted value, if there is one."""
        cursor = self.list.highlighted_line
        displayed = self.list.current_displayed_values
        if cursor is None or cursor >= len(displayed):
            return None
        return displayed[cursor].preview()

    def search_filter(self) -> str:
        return self.list.search_filter()

    def update(self, event: Event) -> ExecutionState:
        """Apply ``event`` and say whether the view should keep running."""
        kind = event.kind
        inserting = self.current_mode is ViewMode.INSERT_MODE
        if kind is EventKind.APP_CLOSED:
            return ExecutionState.CANCELLED
        if kind is EventKind.TOGGLE_VIEW_MODE:
            self.current_mode = self.current_mode.toggle()
        elif kind is EventKind.INPUT_CHAR:
            if inserting:
                self.list.update_filter(event.char)
            else:
                self.options.toggle_option(event.char)
        elif kind is EventKind.ENTR:
            self.list.entr()
            return ExecutionState.EXIT_SUCCESS
        elif inserting:
            if kind is EventKind.BACKSPACE:
                self.list.remove_last_char_from_filter()
            elif kind is EventKind.UP:
                self.list.up()
            elif kind is EventKind.DOWN:
                self.list.down()
            elif kind is EventKind.MARK:
                self.list.mark()
            elif kind is EventKind.MARK_ALL:
                self.list.mark_all()
        return ExecutionState.KEEP

    def response(self) -> ViewResponse[V]:
        return ViewResponse(
            marked_values=self.list.marked_values(),
            selected_options=self.options.active(),
        )