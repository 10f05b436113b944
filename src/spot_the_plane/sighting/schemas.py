"""Pydantic schemas for observer state, plane telemetry and sighting results."""

from pydantic import BaseModel, ConfigDict


class Observer(BaseModel):
    """Observer coordinates in decimal degrees.

    ``None`` marks a value the user has not entered yet, NaN one that did
    not parse.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float | None = None
    longitude: float | None = None


class PlaneTelemetry(BaseModel):
    """Position of the selected plane as read from the flight tracker."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    altitude: float


class SightingResult(BaseModel):
    """Where to look for a plane, relative to the observer.

    Angles are in radians and distances in meters.
    """

    model_config = ConfigDict(frozen=True)

    ground_distance: float
    elevation_angle: float
    slant_distance: float
    azimuth: float
    below_horizon: bool
    trails: str = ""
