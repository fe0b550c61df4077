"""Flat JSON records for persisted workouts.

A record carries every field of its workout plus the ``type`` discriminant.
Decoding re-dispatches on ``type`` so a loaded record becomes a real
``Running`` or ``Cycling`` again rather than a bare mapping.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from mapty.workout.model import Cycling, Running, Workout


WORKOUT_TYPES: dict[str, type[Workout]] = {
    Running.type: Running,
    Cycling.type: Cycling,
}


class WorkoutRecordError(ValueError):
    """Raised when a persisted workout record is invalid."""


def workout_to_record(workout: Workout) -> dict[str, Any]:
    lat, lng = workout.coords
    record: dict[str, Any] = {
        "id": workout.id,
        "date": workout.date.isoformat(),
        "distance": workout.distance,
        "duration": workout.duration,
        "coords": [lat, lng],
        "clicks": workout.clicks,
        "description": workout.description,
        "type": workout.type,
    }
    for name in workout.variant_fields + workout.derived_fields:
        record[name] = getattr(workout, name)
    return record


def workout_from_record(record: object) -> Workout:
    if not isinstance(record, dict):
        raise WorkoutRecordError("Workout record must be an object")

    type_obj = record.get("type")
    workout_cls = WORKOUT_TYPES.get(type_obj) if isinstance(type_obj, str) else None
    if workout_cls is None:
        raise WorkoutRecordError(f"Unknown workout type {type_obj!r}")

    kwargs: dict[str, Any] = {
        "id": _parse_str(record, "id"),
        "date": _parse_date(record),
        "distance": _parse_float(record, "distance"),
        "duration": _parse_float(record, "duration"),
        "coords": _parse_coords(record),
        "clicks": _parse_clicks(record),
        "description": _parse_optional_str(record, "description"),
    }
    # Cached derived metrics are restored as stored; only a missing one is
    # recomputed by the constructor.
    for name in workout_cls.variant_fields:
        kwargs[name] = _parse_float(record, name)
    for name in workout_cls.derived_fields:
        kwargs[name] = _parse_optional_float(record, name)
    return workout_cls(**kwargs)


def _parse_str(record: dict[str, Any], field_name: str) -> str:
    raw = record.get(field_name)
    if not isinstance(raw, str) or not raw:
        raise WorkoutRecordError(f"Workout field '{field_name}' must be a non-empty string")
    return raw


def _parse_optional_str(record: dict[str, Any], field_name: str) -> str | None:
    raw = record.get(field_name)
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise WorkoutRecordError(f"Workout field '{field_name}' must be a string")
    return raw


def _parse_float(record: dict[str, Any], field_name: str) -> float:
    raw = record.get(field_name)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise WorkoutRecordError(f"Workout field '{field_name}' must be a number")
    return float(raw)


def _parse_optional_float(record: dict[str, Any], field_name: str) -> float | None:
    if record.get(field_name) is None:
        return None
    return _parse_float(record, field_name)


def _parse_date(record: dict[str, Any]) -> datetime:
    raw = _parse_str(record, "date")
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise WorkoutRecordError(f"Invalid workout date {raw!r}") from exc


def _parse_coords(record: dict[str, Any]) -> tuple[float, float]:
    raw = record.get("coords")
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise WorkoutRecordError("Workout field 'coords' must be a [lat, lng] pair")
    lat, lng = raw
    for value in (lat, lng):
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            raise WorkoutRecordError("Workout field 'coords' must hold finite numbers")
    return float(lat), float(lng)


def _parse_clicks(record: dict[str, Any]) -> int:
    raw = record.get("clicks", 0)
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise WorkoutRecordError("Workout field 'clicks' must be a non-negative integer")
    return raw
