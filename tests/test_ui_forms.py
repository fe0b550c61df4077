from __future__ import annotations

import pytest

from mapty.ui.forms import (
    INVALID_INPUTS_MESSAGE,
    WorkoutInputError,
    finite_inputs,
    parse_workout_form,
    valid_inputs,
)


def test_parse_running_form_from_strings() -> None:
    data = parse_workout_form(workout_type="running", distance="5", duration=" 30 ", cadence="150")
    assert data.type == "running"
    assert data.distance == 5.0
    assert data.duration == 30.0
    assert data.extra == 150.0


def test_parse_cycling_form_accepts_negative_elevation() -> None:
    data = parse_workout_form(workout_type="cycling", distance=20, duration=60, elevation="-120")
    assert data.type == "cycling"
    assert data.extra == -120.0


@pytest.mark.parametrize(
    "values",
    [
        {"distance": "0", "duration": "30", "cadence": "150"},
        {"distance": "-5", "duration": "30", "cadence": "150"},
        {"distance": "5", "duration": "", "cadence": "150"},
        {"distance": "5", "duration": "abc", "cadence": "150"},
        {"distance": "5", "duration": "30", "cadence": "0"},
        {"distance": "inf", "duration": "30", "cadence": "150"},
        {"distance": "5", "duration": "nan", "cadence": "150"},
        {"distance": "5", "duration": "30", "cadence": None},
    ],
)
def test_running_form_rejects_invalid_values(values: dict[str, str | None]) -> None:
    with pytest.raises(WorkoutInputError, match=INVALID_INPUTS_MESSAGE):
        parse_workout_form(workout_type="running", **values)


@pytest.mark.parametrize("elevation", ["", None, "inf", "up"])
def test_cycling_form_requires_finite_elevation(elevation: str | None) -> None:
    with pytest.raises(WorkoutInputError):
        parse_workout_form(workout_type="cycling", distance="20", duration="60", elevation=elevation)


def test_unknown_type_is_rejected() -> None:
    with pytest.raises(WorkoutInputError, match="Unsupported workout type"):
        parse_workout_form(workout_type="swimming", distance="1", duration="30")


def test_input_predicates() -> None:
    assert valid_inputs(1.0, 2.5)
    assert not valid_inputs(1.0, 0.0)
    assert not valid_inputs(float("inf"))
    assert finite_inputs(-3.0, 0.0)
    assert not finite_inputs(float("nan"))
