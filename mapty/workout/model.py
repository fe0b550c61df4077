"""Workout domain models."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Literal
from uuid import uuid4


WorkoutType = Literal["running", "cycling"]

MONTHS: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def new_workout_id() -> str:
    return str(uuid4())


def format_description(workout_type: str, date: datetime) -> str:
    return f"{workout_type[:1].upper()}{workout_type[1:]} on {MONTHS[date.month - 1]} {date.day}"


def _ratio(numerator: float, denominator: float) -> float:
    # IEEE division: x/0 is a signed infinity and 0/0 is nan.
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass(kw_only=True)
class Workout:
    """Common fields of a recorded workout.

    Only ``clicks`` changes after construction. Derived fields left as
    ``None`` are computed once in ``__post_init__``; passing them in restores
    a previously cached value.
    """

    type: ClassVar[WorkoutType]
    variant_fields: ClassVar[tuple[str, ...]] = ()
    derived_fields: ClassVar[tuple[str, ...]] = ()

    distance: float
    duration: float
    coords: tuple[float, float]
    id: str = field(default_factory=new_workout_id)
    date: datetime = field(default_factory=datetime.now)
    clicks: int = 0
    description: str | None = None

    def __post_init__(self) -> None:
        if "type" not in vars(type(self)):
            raise TypeError(f"{type(self).__name__} is abstract; build a Running or Cycling workout")
        lat, lng = self.coords
        self.coords = (float(lat), float(lng))
        if self.description is None:
            self.description = format_description(self.type, self.date)

    def click(self) -> int:
        self.clicks += 1
        return self.clicks


@dataclass(kw_only=True)
class Running(Workout):
    type: ClassVar[WorkoutType] = "running"
    variant_fields: ClassVar[tuple[str, ...]] = ("cadence",)
    derived_fields: ClassVar[tuple[str, ...]] = ("pace",)

    cadence: float
    pace: float | None = None

    def __post_init__(self) -> None:
        if self.pace is None:
            self.calc_pace()
        super().__post_init__()

    def calc_pace(self) -> float:
        """min/km"""
        self.pace = _ratio(self.duration, self.distance)
        return self.pace


@dataclass(kw_only=True)
class Cycling(Workout):
    type: ClassVar[WorkoutType] = "cycling"
    variant_fields: ClassVar[tuple[str, ...]] = ("elevation_gain",)
    derived_fields: ClassVar[tuple[str, ...]] = ("speed",)

    elevation_gain: float
    speed: float | None = None

    def __post_init__(self) -> None:
        if self.speed is None:
            self.calc_speed()
        super().__post_init__()

    def calc_speed(self) -> float:
        """km/h"""
        self.speed = _ratio(self.distance, self.duration)
        return self.speed


def create_running(
    cadence: float,
    distance: float,
    duration: float,
    coords: tuple[float, float],
) -> Running:
    return Running(cadence=cadence, distance=distance, duration=duration, coords=coords)


def create_cycling(
    elevation_gain: float,
    distance: float,
    duration: float,
    coords: tuple[float, float],
) -> Cycling:
    return Cycling(
        elevation_gain=elevation_gain,
        distance=distance,
        duration=duration,
        coords=coords,
    )
