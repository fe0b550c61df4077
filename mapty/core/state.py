"""Explicit application context shared by the controller and the UI."""

from __future__ import annotations

from dataclasses import dataclass, field

from mapty.workout.store import WorkoutStore


DEFAULT_POSITION: tuple[float, float] = (48.8566, 2.3522)
DEFAULT_MAP_ZOOM = 13


@dataclass
class AppState:
    position: tuple[float, float] | None = None
    pending_coords: tuple[float, float] | None = None
    map_zoom_level: int = DEFAULT_MAP_ZOOM


@dataclass
class AppContext:
    store: WorkoutStore
    state: AppState = field(default_factory=AppState)
