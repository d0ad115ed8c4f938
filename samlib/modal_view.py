"""Interactive modal selector driven by keyboard input."""

from __future__ import annotations

import argparse
import codecs
import contextlib
import os
import re
import sys
from typing import Generic, Iterable, Iterator, TypeVar

from samlib.events import Event, EventKind, MockValue, Value, input_char
from samlib.modal_ui import UIModal
from samlib.options_state import OptionToggle
from samlib.view_state import ExecutionState, ViewResponse, ViewState

V = TypeVar("V", bound=Value)

KEY_ESC = "\x1b"
KEY_UP = "\x1b[A"
KEY_DOWN = "\x1b[B"
KEY_BACKSPACE = "\x7f"
KEY_DELETE = "\x1b[3~"

_UP_KEYS = (KEY_UP, "\x1bOA")
_DOWN_KEYS = (KEY_DOWN, "\x1bOB")
_ENTER_KEYS = ("\n", "\r")

# One escape sequence (CSI or SS3), one alt-modified key, or one character.
_KEY_RE = re.compile(r"\x1b[\[O][\x20-\x3f]*[\x40-\x7e]?|\x1b.|.", re.S)


def _ctrl(c: str) -> str:
    return chr(ord(c) & 0x1F)


def _is_control(ch: str) -> bool:
    code = ord(ch)
    return code < 0x20 or code == 0x7F


def key_to_event(key: str, has_options: bool, allow_multi_select: bool) -> Event | None:
    """Translate a key, as a terminal sends it, into a selector event or None."""
    if key in (KEY_BACKSPACE, KEY_DELETE):
        return Event(EventKind.BACKSPACE)
    if key == KEY_ESC:
        return Event(EventKind.TOGGLE_VIEW_MODE) if has_options else None
    if key in _UP_KEYS or key == _ctrl("p"):
        return Event(EventKind.UP)
    if key in _DOWN_KEYS or key == _ctrl("n"):
        return Event(EventKind.DOWN)
    if key == _ctrl("c"):
        return Event(EventKind.APP_CLOSED)
    if key == _ctrl("s"):
        return Event(EventKind.MARK) if allow_multi_select else None
    if key == _ctrl("a"):
        return Event(EventKind.MARK_ALL) if allow_multi_select else None
    if key in _ENTER_KEYS:
        return Event(EventKind.ENTR)
    if len(key) == 1 and (key == "\t" or not _is_control(key)):
        return input_char(key)
    return None


def _split_keys(text: str) -> list[str]:
    """Split raw terminal input into individual keys."""
    return _KEY_RE.findall(text)


def _read_keys(fd: int) -> Iterator[str]:
    decoder = codecs.getincrementaldecoder("utf-8")("replace")
    while True:
        data = os.read(fd, 1024)
        if not data:
            return
        yield from _split_keys(decoder.decode(data))


@contextlib.contextmanager
def _raw_terminal() -> Iterator[int]:
    try:
        import termios
        import tty

        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
    except (OSError, ValueError, ImportError) as exc:
        raise RuntimeError(f"can't initialize the ui: {exc}") from exc
    except Exception as exc:  # termios.error is not an OSError
        raise RuntimeError(f"can't initialize the ui: {exc}") from exc
    tty.setraw(fd)
    sys.stdout.write("\x1b[?1049h\x1b[?25l")
    sys.stdout.flush()
    try:
        yield fd
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        sys.stdout.write("\x1b[?25h\x1b[?1049l")
        sys.stdout.flush()
        sys.stderr.write("\n")
        sys.stdout.write("\n")
        sys.stdout.flush()


class ModalView(Generic[V]):
    """A filterable list with optional toggles, answered with the marked values."""

    def __init__(
        self,
        values: Iterable[V] = (),
        options: Iterable[OptionToggle] = (),
        allow_multi_select: bool = False,
    ) -> None:
        options = list(options)
        self.has_options = bool(options)
        self.allow_multi_select = allow_multi_select
        self.state: ViewState[V] = ViewState(values, options)
        self.ui = UIModal()
        self._drawn = False

    def run(self) -> ViewResponse[V] | None:
        """Run interactively on the terminal; None if cancelled."""
        with _raw_terminal() as fd:
            return self.run_with_keys(_read_keys(fd))

    def run_with_keys(self, keys: Iterable[str]) -> ViewResponse[V] | None:
        """Drive the view with ``keys``; None if cancelled or the keys run out."""
        if not self._drawn:
            self.ui.draw(self.state)
            self._drawn = True
        for key in keys:
            event = key_to_event(key, self.has_options, self.allow_multi_select)
            if event is None:
                continue
            if event.kind is EventKind.APP_CLOSED:
                return None
            status = self.state.update(event)
            self.ui.draw(self.state)
            if status is ExecutionState.EXIT_SUCCESS:
                return self.state.response()
            if status is ExecutionState.CANCELLED:
                return None
        return None


def main(argv: list[str] | None = None) -> int:
    """Show a demonstration selector and print what was chosen."""
    parser = argparse.ArgumentParser(description="Try out the modal selector.")
    parser.parse_args(argv)
    values = [MockValue(i, f"elem {i}") for i in range(1, 100)]
    options = [
        OptionToggle(key="o", text="option", active=False),
        OptionToggle(key="n", text="not option", active=True),
    ]
    response = ModalView(values, options, True).run()
    print(f"Response: {response!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())