"""Terminal CLI entrypoint for Mapty."""

from __future__ import annotations

import argparse
from pathlib import Path

from mapty.core.state import AppContext
from mapty.ui.controller import MaptyController
from mapty.ui.forms import WorkoutInputError
from mapty.ui.render import summary_line
from mapty.workout.storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from mapty.workout.store import WorkoutStore

MEMORY_STORAGE = ":memory:"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mapty workout tracker")
    parser.add_argument(
        "--ui-web",
        action="store_true",
        help="Launch web UI (NiceGUI) with the workout map",
    )
    parser.add_argument(
        "--web-host",
        default="127.0.0.1",
        help="Host bind for --ui-web",
    )
    parser.add_argument(
        "--web-port",
        type=int,
        default=8088,
        help="Port for --ui-web",
    )
    parser.add_argument(
        "--storage",
        default=None,
        help=f"Storage file (default ~/.mapty/storage.json, '{MEMORY_STORAGE}' for a throwaway store)",
    )
    parser.add_argument("--list", action="store_true", help="Print stored workouts")
    parser.add_argument(
        "--add",
        choices=("running", "cycling"),
        default=None,
        help="Record a workout at --lat/--lng",
    )
    parser.add_argument("--distance", default=None, help="Distance in km")
    parser.add_argument("--duration", default=None, help="Duration in minutes")
    parser.add_argument("--cadence", default=None, help="Cadence in steps/min (running)")
    parser.add_argument("--elevation", default=None, help="Elevation gain in meters (cycling)")
    parser.add_argument("--lat", type=float, default=None, help="Latitude of the workout")
    parser.add_argument("--lng", type=float, default=None, help="Longitude of the workout")
    parser.add_argument("--reset", action="store_true", help="Delete all stored workouts")
    parser.add_argument(
        "--debug-store",
        action="store_true",
        help="Print store and storage activity",
    )
    return parser


def open_storage(raw: str | None, debug: bool = False) -> KeyValueStorage:
    if raw == MEMORY_STORAGE:
        return MemoryStorage()
    return JsonFileStorage(Path(raw) if raw else None, debug=debug)


def run_list(controller: MaptyController) -> int:
    workouts = controller.workouts
    if not workouts:
        print("No workouts recorded")
        return 0
    for workout in workouts:
        print(summary_line(workout))
    return 0


def run_add(controller: MaptyController, args: argparse.Namespace) -> int:
    if args.lat is None or args.lng is None:
        print("--add requires --lat and --lng")
        return 2
    controller.show_form(args.lat, args.lng)
    try:
        workout = controller.submit(
            args.add,
            args.distance,
            args.duration,
            cadence=args.cadence,
            elevation=args.elevation,
        )
    except WorkoutInputError as exc:
        print(exc)
        return 2
    print(summary_line(workout))
    return 0


def run_reset(controller: MaptyController) -> int:
    controller.reset()
    print("All workouts deleted")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.ui_web:
        if args.storage == MEMORY_STORAGE:
            print("--ui-web needs a storage file")
            return 2
        from mapty.ui.web_app import run_web_ui

        return run_web_ui(
            storage_path=Path(args.storage) if args.storage else None,
            host=args.web_host,
            port=args.web_port,
            debug_store=args.debug_store,
        )

    if not (args.list or args.add or args.reset):
        parser.print_help()
        return 1

    store = WorkoutStore(open_storage(args.storage, args.debug_store), debug=args.debug_store)
    controller = MaptyController(AppContext(store=store))
    controller.start()

    if args.reset:
        return run_reset(controller)
    if args.add:
        code = run_add(controller, args)
        if code != 0:
            return code
    if args.list:
        return run_list(controller)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
