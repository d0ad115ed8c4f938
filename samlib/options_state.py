"""Toggleable options offered alongside the selection list."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass
class OptionToggle:
    key: str
    text: str
    active: bool = False


@dataclass
class OptionsState:
    options: list[OptionToggle] = field(default_factory=list)

    def toggle_option(self, key: str) -> None:
        """Flip every option bound to ``key``."""
        for option in self.options:
            if option.key == key:
                option.active = not option.active

    def active(self) -> list[OptionToggle]:
        """Copies of the options that are currently active."""
        return [replace(option) for option in self.options if option.active]