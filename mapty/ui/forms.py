"""Validation of raw workout form input."""

from __future__ import annotations

import math
from dataclasses import dataclass


INVALID_INPUTS_MESSAGE = "Inputs have to be positive numbers!"


class WorkoutInputError(ValueError):
    """Raised when form values cannot become a workout."""


@dataclass(frozen=True)
class WorkoutInput:
    type: str
    distance: float
    duration: float
    extra: float


def valid_inputs(*values: float) -> bool:
    return all(math.isfinite(value) and value > 0 for value in values)


def finite_inputs(*values: float) -> bool:
    return all(math.isfinite(value) for value in values)


def parse_workout_form(
    *,
    workout_type: object,
    distance: object,
    duration: object,
    cadence: object = None,
    elevation: object = None,
) -> WorkoutInput:
    type_name = str(workout_type or "").strip().lower()
    dist = _to_number(distance)
    dur = _to_number(duration)

    if type_name == "running":
        cad = _to_number(cadence)
        if not valid_inputs(cad, dur, dist):
            raise WorkoutInputError(INVALID_INPUTS_MESSAGE)
        return WorkoutInput(type=type_name, distance=dist, duration=dur, extra=cad)

    if type_name == "cycling":
        elev = _to_number(elevation)
        # Elevation gain may be zero or negative.
        if not valid_inputs(dur, dist) or not finite_inputs(elev):
            raise WorkoutInputError(INVALID_INPUTS_MESSAGE)
        return WorkoutInput(type=type_name, distance=dist, duration=dur, extra=elev)

    raise WorkoutInputError(f"Unsupported workout type '{workout_type}'. Use running or cycling")


def _to_number(raw: object) -> float:
    if raw is None or isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan
