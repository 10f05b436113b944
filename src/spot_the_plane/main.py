"""Command line entry point.

Examples:
    spot-the-plane observer set 51.4769 0
    spot-the-plane spot --lat 51.4769 --lon 1 --altitude "32,808 ft"
"""

import argparse
import logging
import math
import sys
from spot_the_plane.config import Settings
from spot_the_plane.exceptions import AppError, InvalidCoordinateError
from spot_the_plane.sighting.parsing import parse_coordinate
from spot_the_plane.sighting.service import SightingService

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )


def _checked_coordinate(name: str, text: str) -> float:
    value = parse_coordinate(text)
    if math.isnan(value):
        raise InvalidCoordinateError(f"Invalid {name}: '{text}'. Expected a decimal number.")
    return value


def _cmd_spot(service: SightingService, args: argparse.Namespace) -> int:
    """Handle the `spot` subcommand."""
    observer = service.load_observer()
    if args.observer_lat is not None or args.observer_lon is not None:
        observer = service.update_observer(
            observer, latitude=args.observer_lat, longitude=args.observer_lon
        )

    plane = service.read_plane(args.lat, args.lon, args.altitude)
    print(service.message_for(observer, plane))
    return 0


def _cmd_observer_set(service: SightingService, args: argparse.Namespace) -> int:
    _checked_coordinate("latitude", args.latitude)
    _checked_coordinate("longitude", args.longitude)

    observer = service.update_observer(
        service.load_observer(), latitude=args.latitude, longitude=args.longitude
    )
    service.save_observer(observer)
    print(service.observer_label(observer))
    return 0


def _cmd_observer_show(service: SightingService, _: argparse.Namespace) -> int:
    print(service.observer_label(service.load_observer()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the spot-the-plane CLI."""
    parser = argparse.ArgumentParser(
        prog="spot-the-plane",
        description="Tell where to look in the sky to spot a plane.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    spot = sub.add_parser("spot", help="Print the direction, elevation and distance of a plane.")
    spot.add_argument("--lat", required=True, help="Plane latitude as shown by the tracker")
    spot.add_argument("--lon", required=True, help="Plane longitude as shown by the tracker")
    spot.add_argument("--altitude", required=True, help="Plane altitude, e.g. '10,000 ft'")
    spot.add_argument("--observer-lat", default=None, help="Override the stored observer latitude")
    spot.add_argument("--observer-lon", default=None, help="Override the stored observer longitude")
    spot.set_defaults(func=_cmd_spot)

    obs = sub.add_parser("observer", help="Manage the stored observer coordinates.")
    obs_sub = obs.add_subparsers(dest="observer_command", required=True)

    obs_set = obs_sub.add_parser("set", help="Store observer coordinates in decimal degrees.")
    obs_set.add_argument("latitude", metavar="LAT")
    obs_set.add_argument("longitude", metavar="LON")
    obs_set.set_defaults(func=_cmd_observer_set)

    obs_show = obs_sub.add_parser("show", help="Print the stored observer coordinates.")
    obs_show.set_defaults(func=_cmd_observer_show)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint used by the `spot-the-plane` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
        _configure_logging(settings)
        return int(args.func(SightingService(settings), args))
    except AppError as exc:
        logger.error("Command failed", extra={"code": exc.code, "error": str(exc)})
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
