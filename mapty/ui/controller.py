"""Controller between the map UI and the workout store."""

from __future__ import annotations

from dataclasses import dataclass

from mapty.core.state import DEFAULT_POSITION, AppContext
from mapty.ui.forms import parse_workout_form
from mapty.workout.model import Workout


@dataclass(frozen=True)
class MapView:
    center: tuple[float, float]
    zoom: int
    animate: bool = True
    pan_duration_sec: float = 1.0


class MaptyController:
    def __init__(self, context: AppContext) -> None:
        self._context = context

    @property
    def context(self) -> AppContext:
        return self._context

    @property
    def workouts(self) -> tuple[Workout, ...]:
        return self._context.store.workouts

    def start(self) -> tuple[Workout, ...]:
        return self._context.store.load()

    def set_position(self, position: tuple[float, float]) -> None:
        self._context.state.position = position

    @property
    def map_center(self) -> tuple[float, float]:
        return self._context.state.position or DEFAULT_POSITION

    def show_form(self, lat: float, lng: float) -> None:
        self._context.state.pending_coords = (float(lat), float(lng))

    def hide_form(self) -> None:
        self._context.state.pending_coords = None

    @property
    def form_open(self) -> bool:
        return self._context.state.pending_coords is not None

    def submit(
        self,
        workout_type: object,
        distance: object,
        duration: object,
        cadence: object = None,
        elevation: object = None,
    ) -> Workout:
        coords = self._context.state.pending_coords
        if coords is None:
            raise RuntimeError("No map location selected")

        data = parse_workout_form(
            workout_type=workout_type,
            distance=distance,
            duration=duration,
            cadence=cadence,
            elevation=elevation,
        )
        workout = self._context.store.submit_workout(
            data.type, data.distance, data.duration, data.extra, coords
        )
        self.hide_form()
        return workout

    def move_to_popup(self, workout_id: str) -> MapView | None:
        workout = self._context.store.find_by_id(workout_id)
        if workout is None:
            return None
        return MapView(center=workout.coords, zoom=self._context.state.map_zoom_level + 3)

    def reset(self) -> None:
        self._context.store.reset()
