"""Shell commands: running them and expanding environment variables in them."""

from __future__ import annotations

import os
import re
import subprocess
from dataclasses import dataclass
from typing import Mapping

_BRACED_VAR = re.compile(r"\$\{(?P<var>[a-zA-Z0-9_]+)\}")
_SUBSTITUTABLE = re.compile(
    r"\$(?:\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)\}|(?P<plain>[A-Za-z_][A-Za-z0-9_]*))"
)


def current_shell_or_sh() -> str:
    """The user's shell from ``$SHELL``, or ``/bin/sh`` when it is unset."""
    return os.environ.get("SHELL", "/bin/sh")


@dataclass(frozen=True)
class ShellCommand:
    """A command line to be run by the user's shell."""

    command: str

    def argv(self) -> list[str]:
        """The argument vector that runs this command through the shell."""
        return [current_shell_or_sh(), "-c", self.command]

    def run(
        self,
        env: Mapping[str, str] | None = None,
        cwd: os.PathLike | str | None = None,
    ) -> subprocess.CompletedProcess:
        """Run the command, capturing its output as bytes.

        The process inherits the current environment, overlaid with ``env``.
        """
        environment = dict(os.environ)
        if env:
            environment.update(env)
        return subprocess.run(
            self.argv(),
            env=environment,
            cwd=os.fspath(cwd) if cwd is not None else None,
            capture_output=True,
            check=False,
        )

    def replace_env_vars_in_command(self, variables: Mapping[str, str]) -> ShellCommand:
        """Expand ``$VAR`` and ``${VAR}`` references.

        Values come from the current environment overlaid with ``variables``;
        unknown variables expand to nothing. Newlines and backslashes are
        removed from the result.
        """
        sanitized = _BRACED_VAR.sub(r"$\g<var>", self.command)
        quoted = sanitized.replace("\n", "'\n'")
        environment = {**os.environ, **variables}

        def lookup(match: re.Match) -> str:
            name = match.group("braced") or match.group("plain")
            return environment.get(name, "")

        substituted = _SUBSTITUTABLE.sub(lookup, quoted)
        return ShellCommand(substituted.replace("\n", "").replace("\\", ""))