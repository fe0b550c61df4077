from __future__ import annotations

import json
from pathlib import Path

from mapty.workout.storage import JsonFileStorage, MemoryStorage


def test_json_file_storage_set_get_remove(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "storage.json"
    storage = JsonFileStorage(path)

    assert storage.get_item("workouts") is None

    storage.set_item("workouts", "[]")
    storage.set_item("other", "x")
    assert path.exists()
    assert storage.get_item("workouts") == "[]"
    assert json.loads(path.read_text(encoding="utf-8")) == {"workouts": "[]", "other": "x"}

    storage.remove_item("workouts")
    assert storage.get_item("workouts") is None
    assert JsonFileStorage(path).get_item("other") == "x"


def test_json_file_storage_corrupt_file_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")
    storage = JsonFileStorage(path)

    assert storage.get_item("workouts") is None

    storage.set_item("workouts", "[]")
    assert storage.get_item("workouts") == "[]"


def test_json_file_storage_non_object_payload(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert JsonFileStorage(path).get_item("workouts") is None


def test_remove_missing_key_does_not_create_file(tmp_path: Path) -> None:
    path = tmp_path / "storage.json"
    JsonFileStorage(path).remove_item("workouts")
    assert not path.exists()


def test_memory_storage() -> None:
    storage = MemoryStorage({"a": "1"})
    assert storage.get_item("a") == "1"
    storage.set_item("b", "2")
    storage.remove_item("a")
    storage.remove_item("missing")
    assert storage.get_item("a") is None
    assert storage.get_item("b") == "2"
