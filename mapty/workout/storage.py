"""Durable key-value slots for persisted app data."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol


def _default_storage_path() -> Path:
    return Path.home() / ".mapty" / "storage.json"


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage:
    """String slots kept in a single JSON object file.

    A missing or unreadable file reads as empty. Every write rewrites the
    whole file.
    """

    def __init__(self, path: Path | None = None, debug: bool = False) -> None:
        self.path = path or _default_storage_path()
        self._debug = debug

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if items.pop(key, None) is not None:
            self._write_all(items)

    def _read_all(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            print(f"[STORAGE] ignoring unreadable {self.path}: {exc}")
            return {}
        if not isinstance(payload, dict):
            print(f"[STORAGE] ignoring {self.path}: top-level value is not an object")
            return {}
        return payload

    def _write_all(self, items: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items, ensure_ascii=True, indent=2), encoding="utf-8")
        if self._debug:
            print(f"[STORAGE] wrote {len(items)} key(s) to {self.path}")
