"""A small key/value store persisted to a JSON file, with optional expiry."""

from __future__ import annotations

import json
import os
import time
from datetime import timedelta
from pathlib import Path
from typing import Any, Callable, Generic, TypeVar

V = TypeVar("V")


class AssociativeStateError(Exception):
    """Raised when the state file cannot be read or written."""


def _ttl_seconds(ttl: timedelta | float | None) -> int | None:
    if ttl is None:
        return None
    if isinstance(ttl, timedelta):
        return int(ttl.total_seconds())
    return int(ttl)


def _valid_record(record: Any) -> bool:
    return isinstance(record, dict) and "entry" in record and isinstance(record.get("when"), int)


class AssociativeState(Generic[V]):
    """Map of string keys to values, stored with the time they were written.

    With a ``ttl``, entries older than it are treated as absent and are
    purged on the next write. ``encode``/``decode`` convert values to and
    from JSON-compatible data.
    """

    def __init__(
        self,
        path: os.PathLike | str,
        ttl: timedelta | float | None = None,
        encode: Callable[[V], Any] | None = None,
        decode: Callable[[Any], V] | None = None,
    ) -> None:
        self.path = Path(path)
        self._ttl = _ttl_seconds(ttl)
        self._encode = encode
        self._decode = decode
        self._load()

    def put(self, key: str, value: V) -> None:
        data = self._load()
        data[key] = {"entry": self._to_json(value), "when": int(time.time())}
        for stale in [k for k, record in data.items() if not self._is_valid(record)]:
            del data[stale]
        self._save(data, "write to")

    def get(self, key: str) -> V | None:
        record = self._load().get(key)
        if record is None or not self._is_valid(record):
            return None
        return self._from_json(record["entry"])

    def delete(self, key: str) -> V | None:
        """Remove ``key``; return its value if it was present and not expired."""
        data = self._load()
        record = data.pop(key, None)
        self._save(data, "save to")
        if record is None or not self._is_valid(record):
            return None
        return self._from_json(record["entry"])

    def entries(self) -> list[tuple[str, V]]:
        """All stored pairs, expired ones included."""
        return [(key, self._from_json(record["entry"])) for key, record in self._load().items()]

    def _to_json(self, value: V) -> Any:
        return self._encode(value) if self._encode is not None else value

    def _from_json(self, data: Any) -> V:
        return self._decode(data) if self._decode is not None else data

    def _is_valid(self, record: dict) -> bool:
        if self._ttl is None:
            return True
        return record["when"] + self._ttl > int(time.time())

    def _load(self) -> dict[str, dict]:
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
            if isinstance(data, dict) and all(_valid_record(r) for r in data.values()):
                return data
        except (OSError, ValueError):
            pass
        data = {}
        self._save(data, "load")
        return data

    def _save(self, data: dict, action: str) -> None:
        try:
            text = json.dumps(data)
        except (TypeError, ValueError) as exc:
            raise AssociativeStateError(
                f"failed to write to associative state because\n->{exc}"
            ) from exc
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp.write_text(text, encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            raise AssociativeStateError(
                f"failed to {action} associative state because\n-> {exc}"
            ) from exc