"""NiceGUI web UI for Mapty."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from nicegui import Client, ui

from mapty.core.state import AppContext
from mapty.ui.controller import MaptyController
from mapty.ui.forms import WorkoutInputError
from mapty.ui.render import MarkerTracker, list_entries, popup_options, popup_text
from mapty.workout.model import Workout
from mapty.workout.storage import JsonFileStorage
from mapty.workout.store import WorkoutStore

TILE_URL = "https://{s}.tile.openstreetmap.fr/hot/{z}/{x}/{y}.png"
TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)
GEOLOCATION_TIMEOUT_SEC = 15.0

_GEOLOCATION_JS = """
return await new Promise((resolve) => {
  if (!navigator.geolocation) { resolve(null); return; }
  navigator.geolocation.getCurrentPosition(
    (pos) => resolve([pos.coords.latitude, pos.coords.longitude]),
    () => resolve(null),
  );
});
"""


def _styles() -> None:
    ui.add_head_html(
        """
        <style>
          :root {
            --mp-bg: #2d3439;
            --mp-surface: #42484d;
            --mp-text: #ececec;
            --mp-running: #00c46a;
            --mp-cycling: #ffb545;
          }
          body { background: var(--mp-bg); color: var(--mp-text); }
          .workout {
            background: var(--mp-surface);
            border-radius: 5px;
            cursor: pointer;
          }
          .workout--running { border-left: 5px solid var(--mp-running); }
          .workout--cycling { border-left: 5px solid var(--mp-cycling); }
          .running-popup .leaflet-popup-content-wrapper { border-left: 5px solid var(--mp-running); }
          .cycling-popup .leaflet-popup-content-wrapper { border-left: 5px solid var(--mp-cycling); }
          .workout__unit { color: #aaa; font-size: 0.8rem; text-transform: uppercase; }
        </style>
        """
    )


def _build_page(storage_path: Path | None, debug_store: bool) -> None:
    @ui.page("/")
    async def index(client: Client) -> None:
        _styles()
        markers = MarkerTracker()

        store = WorkoutStore(
            JsonFileStorage(storage_path, debug=debug_store),
            on_change=lambda workouts: on_change(workouts),
            on_reset=ui.navigate.reload,
            debug=debug_store,
        )
        context = AppContext(store=store)
        controller = MaptyController(context)

        with ui.row().classes("w-full h-screen no-wrap gap-0"):
            with ui.column().classes("w-[420px] h-full p-4 gap-3 overflow-auto"):
                ui.label("Mapty").classes("text-2xl font-bold")
                with ui.card().classes("w-full workout") as form_card:
                    with ui.grid(columns=2).classes("w-full gap-2"):
                        type_select = ui.select(
                            {"running": "Running", "cycling": "Cycling"},
                            value="running",
                            label="Type",
                        )
                        distance_input = ui.input("Distance", placeholder="km")
                        duration_input = ui.input("Duration", placeholder="min")
                        cadence_input = ui.input("Cadence", placeholder="step/min")
                        elevation_input = ui.input("Elev Gain", placeholder="meters")
                    submit_btn = ui.button("OK")
                entries_column = ui.column().classes("w-full gap-2")
                reset_link = ui.label("Reset all workouts").classes(
                    "text-sm underline cursor-pointer mt-auto"
                )
            workout_map = ui.leaflet(
                center=controller.map_center, zoom=context.state.map_zoom_level
            )
            workout_map.classes("grow h-full")

        workout_map.clear_layers()
        workout_map.tile_layer(url_template=TILE_URL, options={"attribution": TILE_ATTRIBUTION})
        form_card.set_visibility(False)
        elevation_input.set_visibility(False)

        def render_marker(workout: Workout) -> None:
            marker = workout_map.marker(latlng=workout.coords)
            marker.run_method("bindPopup", popup_text(workout), popup_options(workout))
            marker.run_method("openPopup")

        def render_list(workouts: tuple[Workout, ...]) -> None:
            entries_column.clear()
            with entries_column:
                for entry in list_entries(workouts):
                    with ui.card().classes(
                        f"w-full workout workout--{entry.type}"
                    ).props(f"data-id={entry.id}") as card:
                        ui.label(entry.title).classes("text-base font-semibold")
                        with ui.row().classes("gap-4"):
                            for detail in entry.details:
                                with ui.row().classes("items-baseline gap-1"):
                                    ui.label(detail.icon)
                                    ui.label(detail.value).classes("font-semibold")
                                    ui.label(detail.unit).classes("workout__unit")
                    card.on("click", lambda _, wid=entry.id: on_move_to_popup(wid))

        def on_change(workouts: tuple[Workout, ...]) -> None:
            for workout in markers.update(workouts):
                render_marker(workout)
            render_list(workouts)

        def show_form(lat: float, lng: float) -> None:
            controller.show_form(lat, lng)
            form_card.set_visibility(True)
            distance_input.run_method("focus")

        def hide_form() -> None:
            for field in (distance_input, duration_input, cadence_input, elevation_input):
                field.value = ""
            controller.hide_form()
            form_card.set_visibility(False)

        def on_map_click(event: Any) -> None:
            latlng = event.args.get("latlng") or {}
            if "lat" not in latlng or "lng" not in latlng:
                return
            show_form(latlng["lat"], latlng["lng"])

        def on_toggle_type() -> None:
            running = type_select.value == "running"
            cadence_input.set_visibility(running)
            elevation_input.set_visibility(not running)

        def on_submit() -> None:
            if not controller.form_open:
                return
            try:
                controller.submit(
                    type_select.value,
                    distance_input.value,
                    duration_input.value,
                    cadence=cadence_input.value,
                    elevation=elevation_input.value,
                )
            except WorkoutInputError as exc:
                ui.notify(str(exc), color="negative")
                return
            hide_form()

        def on_move_to_popup(workout_id: str) -> None:
            view = controller.move_to_popup(workout_id)
            if view is None:
                return
            workout_map.run_map_method(
                "setView",
                list(view.center),
                view.zoom,
                {"animate": view.animate, "pan": {"duration": view.pan_duration_sec}},
            )

        def on_reset() -> None:
            controller.reset()

        workout_map.on("map-click", on_map_click)
        type_select.on_value_change(lambda _: on_toggle_type())
        submit_btn.on_click(on_submit)
        for field in (distance_input, duration_input, cadence_input, elevation_input):
            field.on("keydown.enter", on_submit)
        reset_link.on("click", on_reset)

        controller.start()

        await client.connected()
        # Popup calls on a marker are dropped until the leaflet map is up.
        await workout_map.initialized()
        for workout in markers.mark_ready():
            render_marker(workout)

        try:
            position = await ui.run_javascript(_GEOLOCATION_JS, timeout=GEOLOCATION_TIMEOUT_SEC)
        except TimeoutError:
            position = None
        if not position:
            ui.notify("Could not get your position", color="warning")
            return
        controller.set_position((float(position[0]), float(position[1])))
        workout_map.set_center(controller.map_center)


def run_web_ui(
    storage_path: Path | None = None,
    host: str = "127.0.0.1",
    port: int = 8088,
    debug_store: bool = False,
) -> int:
    _build_page(storage_path, debug_store)
    ui.run(host=host, port=port, reload=False, title="Mapty")
    return 0
