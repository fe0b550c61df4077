from __future__ import annotations

import math
from datetime import datetime

import pytest

from mapty.workout.model import (
    MONTHS,
    Cycling,
    Running,
    Workout,
    create_cycling,
    create_running,
    format_description,
)


def test_create_running_computes_pace_and_description() -> None:
    workout = create_running(150, 5, 30, [10, 10])

    assert workout.type == "running"
    assert workout.pace == 6.0
    assert workout.pace == workout.duration / workout.distance
    assert workout.coords == (10.0, 10.0)
    assert workout.clicks == 0
    expected = f"Running on {MONTHS[workout.date.month - 1]} {workout.date.day}"
    assert workout.description == expected


def test_create_cycling_computes_speed_and_description() -> None:
    workout = create_cycling(200, 20, 60, (5, 5))

    assert workout.type == "cycling"
    assert workout.speed == 20 / 60
    assert workout.elevation_gain == 200
    assert workout.description is not None
    assert workout.description.startswith("Cycling on ")


def test_cycling_accepts_negative_elevation() -> None:
    workout = create_cycling(-35.5, 12.5, 40, (0, 0))
    assert workout.elevation_gain == -35.5
    assert workout.speed == 12.5 / 40


def test_format_description_has_no_zero_padding() -> None:
    assert format_description("running", datetime(2026, 3, 7, 8, 30)) == "Running on March 7"
    assert format_description("cycling", datetime(2026, 12, 25)) == "Cycling on December 25"


def test_zero_divisor_yields_ieee_values_instead_of_raising() -> None:
    assert create_running(150, 0, 30, (0, 0)).pace == math.inf
    assert create_cycling(10, 5, 0, (0, 0)).speed == math.inf
    assert create_cycling(10, -5, 0, (0, 0)).speed == -math.inf
    undefined = create_running(150, 0, 0, (0, 0))
    assert undefined.pace is not None
    assert math.isnan(undefined.pace)


def test_ids_are_distinct_within_a_session() -> None:
    ids = {create_running(150, 5, 30, (1, 1)).id for _ in range(200)}
    assert len(ids) == 200


def test_click_increments_counter_only() -> None:
    workout = create_running(160, 10, 50, (1, 2))
    pace = workout.pace
    description = workout.description

    assert workout.click() == 1
    assert workout.click() == 2
    assert workout.clicks == 2
    assert workout.pace == pace
    assert workout.description == description


def test_cached_derived_fields_are_not_recomputed() -> None:
    workout = Running(
        distance=5,
        duration=30,
        coords=(1, 1),
        cadence=150,
        pace=5.5,
        description="Running on January 1",
        date=datetime(2026, 7, 4),
    )
    assert workout.pace == 5.5
    assert workout.description == "Running on January 1"

    assert workout.calc_pace() == 6.0
    assert workout.pace == 6.0


def test_variant_field_declarations() -> None:
    assert Running.variant_fields == ("cadence",)
    assert Running.derived_fields == ("pace",)
    assert Cycling.variant_fields == ("elevation_gain",)
    assert Cycling.derived_fields == ("speed",)


def test_base_workout_cannot_be_built_directly() -> None:
    with pytest.raises(TypeError, match="abstract"):
        Workout(distance=1, duration=1, coords=(0, 0))
