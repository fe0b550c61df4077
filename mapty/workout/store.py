"""In-memory workout collection backed by a durable key-value slot."""

from __future__ import annotations

import json
import math
from typing import Callable, Literal

from mapty.workout.model import Workout, create_cycling, create_running
from mapty.workout.records import WorkoutRecordError, workout_from_record, workout_to_record
from mapty.workout.storage import KeyValueStorage


STORAGE_KEY = "workouts"

StoreState = Literal["uninitialized", "loaded"]
ChangeCallback = Callable[[tuple[Workout, ...]], None]
ResetCallback = Callable[[], None]

_FACTORIES: dict[str, Callable[[float, float, float, tuple[float, float]], Workout]] = {
    "running": create_running,
    "cycling": create_cycling,
}


class WorkoutContractError(ValueError):
    """Raised when a workout is submitted with arguments that break the caller contract."""


class WorkoutStore:
    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = STORAGE_KEY,
        on_change: ChangeCallback | None = None,
        on_reset: ResetCallback | None = None,
        debug: bool = False,
    ) -> None:
        self._storage = storage
        self._key = key
        self._on_change = on_change
        self._on_reset = on_reset
        self._debug = debug
        self._workouts: list[Workout] = []
        self._state: StoreState = "uninitialized"

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def workouts(self) -> tuple[Workout, ...]:
        return tuple(self._workouts)

    def __len__(self) -> int:
        return len(self._workouts)

    def load(self) -> tuple[Workout, ...]:
        """Replace the collection with whatever the slot holds.

        A missing slot, unparsable JSON or a payload that is not an array all
        yield an empty collection. Records that fail to decode are skipped.
        """
        self._workouts = self._read_slot()
        self._state = "loaded"
        if self._debug:
            print(f"[STORE] loaded {len(self._workouts)} workout(s) from '{self._key}'")
        self._notify_change()
        return self.workouts

    def append(self, workout: Workout) -> None:
        self._workouts.append(workout)
        if self._debug:
            print(f"[STORE] appended {workout.type} {workout.id}")
        self.persist()
        self._notify_change()

    def submit_workout(
        self,
        workout_type: str,
        distance: float,
        duration: float,
        extra: float,
        coords: tuple[float, float],
    ) -> Workout:
        """Create the variant named by ``workout_type`` and append it.

        ``extra`` is the cadence for running and the elevation gain for
        cycling. Distance and duration are trusted as already validated.
        """
        factory = _FACTORIES.get(workout_type)
        if factory is None:
            raise WorkoutContractError(f"Unknown workout type {workout_type!r}")
        if isinstance(extra, bool) or not isinstance(extra, (int, float)) or not math.isfinite(extra):
            raise WorkoutContractError(f"Invalid {_extra_name(workout_type)} {extra!r}")
        if workout_type == "running" and extra <= 0:
            raise WorkoutContractError(f"cadence must be > 0, got {extra!r}")

        workout = factory(extra, distance, duration, coords)
        self.append(workout)
        return workout

    def find_by_id(self, workout_id: str) -> Workout | None:
        for workout in self._workouts:
            if workout.id == workout_id:
                return workout
        return None

    def persist(self) -> None:
        payload = [workout_to_record(workout) for workout in self._workouts]
        self._storage.set_item(self._key, json.dumps(payload, ensure_ascii=True))
        if self._debug:
            print(f"[STORE] persisted {len(payload)} workout(s) to '{self._key}'")

    def reset(self) -> None:
        self._storage.remove_item(self._key)
        self._workouts = []
        self._state = "uninitialized"
        if self._debug:
            print(f"[STORE] cleared '{self._key}'")
        if self._on_reset is not None:
            self._on_reset()

    def _read_slot(self) -> list[Workout]:
        raw = self._storage.get_item(self._key)
        if raw is None:
            return []
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            print(f"[STORE] ignoring unparsable '{self._key}' slot: {exc}")
            return []
        if not isinstance(payload, list):
            print(f"[STORE] ignoring '{self._key}' slot: expected an array")
            return []

        out: list[Workout] = []
        for index, item in enumerate(payload):
            try:
                out.append(workout_from_record(item))
            except WorkoutRecordError as exc:
                print(f"[STORE] skipping record {index + 1}: {exc}")
        return out

    def _notify_change(self) -> None:
        if self._on_change is not None:
            self._on_change(self.workouts)


def _extra_name(workout_type: str) -> str:
    return "cadence" if workout_type == "running" else "elevation gain"
