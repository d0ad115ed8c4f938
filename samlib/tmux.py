"""Control of a tmux session through the tmux command line."""

from __future__ import annotations

import enum
import logging
import subprocess

log = logging.getLogger(__name__)


class TmuxError(Exception):
    """Raised when tmux cannot be reached or its output cannot be read."""


class NoTmuxError(TmuxError):
    """Raised when there is no current tmux session."""

    def __init__(self) -> None:
        super().__init__("not running in tmux")


class WindowLayout(enum.Enum):
    TILED = "tiled"
    MAIN_VERTICAL = "main-vertical"
    MAIN_HORIZONTAL = "main-horizontal"
    EVEN_VERTICAL = "even-vertical"
    EVEN_HORIZONTAL = "even-horizontal"

    def __str__(self) -> str:
        return self.value


def parse_list_windows_output(stdout: bytes) -> list[str]:
    """Split tmux output into lines."""
    try:
        text = stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TmuxError(f"error while parsing tmux output {exc}") from exc
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _tmux(*args: str) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(["tmux", *args], capture_output=True, check=False)
    except OSError as exc:
        raise TmuxError("error while interracting with tmux") from exc


class Tmux:
    """A handle on one tmux session."""

    def __init__(self, target_session: str) -> None:
        self.target_session = target_session

    @staticmethod
    def current_session_name() -> str:
        output = _tmux("display-message", "-p", "#S")
        lines = parse_list_windows_output(output.stdout)
        if not lines:
            raise NoTmuxError()
        return lines[0]

    @classmethod
    def with_current_session(cls) -> Tmux:
        return cls(cls.current_session_name())

    def list_windows(self) -> list[str]:
        output = _tmux("list-windows", "-t", self.target_session, "-F", "#{window_name}")
        return parse_list_windows_output(output.stdout)

    def run_command_in_new_pane(self, target_window: str, command: str, directory: str) -> bool:
        """Run ``command`` in a new pane of ``target_window``, creating the window if needed.

        Returns whether tmux reported success.
        """
        if target_window in self.list_windows():
            log.debug("target window %r was found!", target_window)
            output = _tmux(
                "split-window", "-t", target_window, "-v", "-c", directory, command
            )
        else:
            log.debug("target window %r was not found! creating it", target_window)
            output = _tmux("new-window", "-n", target_window, "-c", directory, command)
        log.debug("executed command %r and got output %r", command, output)
        return output.returncode == 0

    def set_layout(self, layout: WindowLayout, target_window: str) -> bool:
        output = _tmux("select-layout", "-t", target_window, str(layout))
        return output.returncode == 0