"""Presentation helpers for workout markers and list entries.

Everything here branches on the ``type`` discriminant so records restored
from storage render the same way as freshly created workouts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, cast

from mapty.workout.model import Cycling, Running, Workout


RUNNING_ICON = "🏃‍♂️"
CYCLING_ICON = "🚴‍♀️"

POPUP_OPTIONS: dict[str, Any] = {
    "maxWidth": 250,
    "minWidth": 100,
    "autoClose": False,
    "closeOnClick": False,
}


@dataclass(frozen=True)
class WorkoutDetail:
    icon: str
    value: str
    unit: str


@dataclass(frozen=True)
class WorkoutEntry:
    id: str
    type: str
    title: str
    details: tuple[WorkoutDetail, ...]


def _fmt_number(value: float) -> str:
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return str(value)


def _fmt_metric(value: float | None) -> str:
    if value is None or not math.isfinite(value):
        return "--"
    return f"{value:.1f}"


def workout_icon(workout: Workout) -> str:
    return RUNNING_ICON if workout.type == "running" else CYCLING_ICON


def popup_class(workout: Workout) -> str:
    return f"{workout.type}-popup"


def popup_text(workout: Workout) -> str:
    return f"{workout_icon(workout)} {workout.description}"


def popup_options(workout: Workout) -> dict[str, Any]:
    return {**POPUP_OPTIONS, "className": popup_class(workout)}


def workout_details(workout: Workout) -> tuple[WorkoutDetail, ...]:
    details = [
        WorkoutDetail(workout_icon(workout), _fmt_number(workout.distance), "km"),
        WorkoutDetail("⏱", _fmt_number(workout.duration), "min"),
    ]
    if workout.type == "running":
        running = cast(Running, workout)
        details.append(WorkoutDetail("⚡️", _fmt_metric(running.pace), "min/km"))
        details.append(WorkoutDetail("🦶🏼", _fmt_number(running.cadence), "spm"))
    elif workout.type == "cycling":
        cycling = cast(Cycling, workout)
        details.append(WorkoutDetail("⚡️", _fmt_metric(cycling.speed), "km/h"))
        details.append(WorkoutDetail("⛰", _fmt_number(cycling.elevation_gain), "m"))
    return tuple(details)


def list_entries(workouts: Iterable[Workout]) -> list[WorkoutEntry]:
    """Newest first, matching the order entries are inserted under the form."""
    entries = [
        WorkoutEntry(
            id=workout.id,
            type=workout.type,
            title=workout.description or "",
            details=workout_details(workout),
        )
        for workout in workouts
    ]
    entries.reverse()
    return entries


def summary_line(workout: Workout) -> str:
    parts = [f"{detail.value} {detail.unit}" for detail in workout_details(workout)]
    return f"{workout.id}  {workout_icon(workout)} {workout.description:<22} " + " | ".join(parts)


class MarkerTracker:
    """Hold map markers back until the map can take them, then hand each out once."""

    def __init__(self) -> None:
        self._ready = False
        self._latest: tuple[Workout, ...] = ()
        self._rendered: set[str] = set()

    @property
    def ready(self) -> bool:
        return self._ready

    def update(self, workouts: Iterable[Workout]) -> list[Workout]:
        self._latest = tuple(workouts)
        if not self._ready:
            return []
        return self._take_new()

    def mark_ready(self) -> list[Workout]:
        self._ready = True
        return self._take_new()

    def _take_new(self) -> list[Workout]:
        out = [workout for workout in self._latest if workout.id not in self._rendered]
        self._rendered.update(workout.id for workout in out)
        return out
