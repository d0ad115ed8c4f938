"""An append-only list persisted to a JSON file, optionally bounded in size."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Generic, TypeVar

V = TypeVar("V")


class SequentialStateError(Exception):
    """Raised when the state file cannot be read or written."""


class SequentialState(Generic[V]):
    """Ordered list of values; the oldest is dropped once ``max_size`` is exceeded."""

    def __init__(
        self,
        path: os.PathLike | str,
        max_size: int | None = None,
        encode: Callable[[V], Any] | None = None,
        decode: Callable[[Any], V] | None = None,
    ) -> None:
        self.path = Path(path)
        self.max_size = max_size
        self._encode = encode
        self._decode = decode
        self._load()

    def push(self, entry: V) -> None:
        data = self._load()
        data.append(self._to_json(entry))
        if self.max_size is not None and len(data) > self.max_size:
            del data[0]
        self._save(data, "write to")

    def last(self) -> V | None:
        data = self._load()
        return self._from_json(data[-1]) if data else None

    def first(self) -> V | None:
        data = self._load()
        return self._from_json(data[0]) if data else None

    def entries(self) -> list[V]:
        return [self._from_json(item) for item in self._load()]

    def delete(self, position: int) -> None:
        """Remove the entry at ``position``; raise IndexError if there is none."""
        data = self._load()
        if not 0 <= position < len(data):
            raise IndexError(f"position {position} out of range for {len(data)} entries")
        del data[position]
        self._save(data, "save to")

    def _to_json(self, value: V) -> Any:
        return self._encode(value) if self._encode is not None else value

    def _from_json(self, data: Any) -> V:
        return self._decode(data) if self._decode is not None else data

    def _load(self) -> list:
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
            if isinstance(data, list):
                return data
        except (OSError, ValueError):
            pass
        data = []
        self._save(data, "load")
        return data

    def _save(self, data: list, action: str) -> None:
        try:
            text = json.dumps(data)
        except (TypeError, ValueError) as exc:
            raise SequentialStateError(
                f"failed to write to sequential state because\n->{exc}"
            ) from exc
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp.write_text(text, encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            raise SequentialStateError(
                f"failed to {action} sequential state because\n->{exc}"
            ) from exc