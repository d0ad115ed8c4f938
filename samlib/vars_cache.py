"""Caches for the output of commands that produce variable choices."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from datetime import timedelta

from samlib.associative_state import AssociativeState, AssociativeStateError


class CacheError(Exception):
    """Raised when the cache cannot be read or written."""


@dataclass(frozen=True)
class CacheEntry:
    name: str
    command: str
    output: str


class VarsCache(ABC):
    """Stores command output keyed by the command line."""

    @abstractmethod
    def put(self, name: str, command: str, output: str) -> None:
        """Record ``output`` for ``command``, produced for variable ``name``."""

    @abstractmethod
    def get(self, command: str) -> str | None:
        """Return the cached output of ``command``, if any."""


def _wrap(exc: AssociativeStateError) -> CacheError:
    return CacheError(f"could not interract with cache because\n-> {exc}")


class FileVarsCache(VarsCache):
    """A cache persisted to a file whose entries expire after ``ttl``."""

    def __init__(self, path: os.PathLike | str, ttl: timedelta | float) -> None:
        try:
            self._state: AssociativeState[CacheEntry] = AssociativeState(
                path,
                ttl=ttl,
                encode=asdict,
                decode=lambda data: CacheEntry(**data),
            )
        except AssociativeStateError as exc:
            raise _wrap(exc) from exc

    def put(self, name: str, command: str, output: str) -> None:
        entry = CacheEntry(name=name, command=command, output=output)
        try:
            self._state.put(command, entry)
        except AssociativeStateError as exc:
            raise _wrap(exc) from exc

    def get(self, command: str) -> str | None:
        try:
            entry = self._state.get(command)
        except AssociativeStateError as exc:
            raise _wrap(exc) from exc
        return entry.output if entry is not None else None

    def entries(self) -> list[CacheEntry]:
        try:
            return [entry for _, entry in self._state.entries()]
        except AssociativeStateError as exc:
            raise _wrap(exc) from exc

    def delete(self, key: str) -> CacheEntry | None:
        try:
            return self._state.delete(key)
        except AssociativeStateError as exc:
            raise _wrap(exc) from exc

    def clear_cache(self) -> None:
        try:
            for key, _ in self._state.entries():
                self._state.delete(key)
        except AssociativeStateError as exc:
            raise _wrap(exc) from exc


class NoopVarsCache(VarsCache):
    """A cache that stores nothing."""

    def put(self, name: str, command: str, output: str) -> None:
        return None

    def get(self, command: str) -> str | None:
        return None