"""Sighting service: observer handling and the info line shown to the user."""

import logging
import math

from spot_the_plane.config import Settings
from spot_the_plane.observer.store import ObserverStore
from spot_the_plane.sighting.geometry import compute_sighting, format_sighting
from spot_the_plane.sighting.parsing import (
    ELLIPSIS,
    parse_altitude,
    parse_coordinate,
    parse_plane_coordinate,
    reduce_coordinate,
)
from spot_the_plane.sighting.schemas import Observer, PlaneTelemetry

logger = logging.getLogger(__name__)

AWAITING_COORDINATES = "Awaiting coordinates"
INVALID_COORDINATES = "Invalid coordinates"


def _coordinate_from_text(text: str) -> float | None:
    if text == "":
        return None
    return parse_coordinate(text)


class SightingService:
    """Turn plane telemetry and observer coordinates into a sighting line.

    The observer is held by the caller and passed in on every call; the
    service only knows how to load and save it.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._store = ObserverStore(settings.observer_file)

    def load_observer(self) -> Observer:
        return self._store.load()

    def save_observer(self, observer: Observer) -> None:
        self._store.save(observer)

    def update_observer(
        self,
        observer: Observer,
        *,
        latitude: str | None = None,
        longitude: str | None = None,
    ) -> Observer:
        """Apply coordinates typed by the user.

        Args:
            observer: Current observer.
            latitude: New latitude text, or None to keep the current one.
            longitude: New longitude text, or None to keep the current one.

        Returns:
            A new Observer. Empty text unsets a value and text that does not
            parse becomes NaN.
        """
        update: dict[str, float | None] = {}
        if latitude is not None:
            update["latitude"] = _coordinate_from_text(latitude)
        if longitude is not None:
            update["longitude"] = _coordinate_from_text(longitude)
        return observer.model_copy(update=update)

    def read_plane(self, latitude: str, longitude: str, altitude: str) -> PlaneTelemetry:
        """Build telemetry from the tracker's latitude, longitude and altitude cells."""
        return PlaneTelemetry(
            latitude=parse_plane_coordinate(latitude),
            longitude=parse_plane_coordinate(longitude),
            altitude=parse_altitude(altitude),
        )

    def message_for(self, observer: Observer, plane: PlaneTelemetry) -> str:
        """Return the line to display for a plane seen from ``observer``.

        Args:
            observer: Observer coordinates held by the caller.
            plane: Current telemetry of the selected plane.

        Returns:
            A placeholder while the observer is missing or invalid, otherwise
            the formatted sighting such as 'E 8° 70km'.
        """
        if observer.latitude is None or observer.longitude is None:
            return AWAITING_COORDINATES
        if math.isnan(observer.latitude) or math.isnan(observer.longitude):
            logger.debug(
                "Observer coordinates are invalid",
                extra={"latitude": observer.latitude, "longitude": observer.longitude},
            )
            return INVALID_COORDINATES

        result = compute_sighting(
            observer.latitude,
            observer.longitude,
            plane.latitude,
            plane.longitude,
            plane.altitude,
        )
        logger.debug(
            "Computed sighting",
            extra={"azimuth": result.azimuth, "below_horizon": result.below_horizon},
        )
        return format_sighting(result)

    def observer_label(self, observer: Observer) -> str:
        """Compact 'lat | lon' label for the observer, '...' for unset values."""
        parts = [
            ELLIPSIS if value is None else reduce_coordinate(value)
            for value in (observer.latitude, observer.longitude)
        ]
        return " | ".join(parts)
