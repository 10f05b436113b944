"""Sky geometry between an observer on the ground and a plane in flight.

Angles are converted to radians on entry and back to degrees only when a
line is rendered for the user. The terminology is:

    - azimuth: angle from true north, clockwise (north = 0, east = pi/2)
    - elevation: angle above the horizon (horizon = 0, zenith = pi/2)
    - slant distance: straight-line distance from the observer to the plane

Bearing and distance formulas follow
http://www.movable-type.co.uk/scripts/latlong.html
"""

import math

from spot_the_plane.sighting.schemas import SightingResult

EARTH_RADIUS_M = 6_371_000
HORIZON_THRESHOLD_RAD = math.pi / 60
CONTRAIL_ALTITUDE_M = 9144
NO_TRAILS = "No trails"
BELOW_HORIZON = "Below the horizon"

COMPASS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)


def to_rad(degrees: float) -> float:
    return degrees * math.pi / 180


def to_deg(radians: float) -> float:
    return radians * (180 / math.pi)


def azimuth_between(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Initial bearing from point 1 to point 2, normalized into [0, 2*pi)."""
    y = math.sin(lon2 - lon1) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(lon2 - lon1)
    return (math.atan2(y, x) + 2 * math.pi) % (2 * math.pi)


def ground_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Equirectangular distance in meters, good enough for tens of kilometers."""
    dlat = lat2 - lat1
    x = (lon2 - lon1) * math.cos((lat1 + lat2) / 2)
    return math.sqrt(x * x + dlat * dlat) * EARTH_RADIUS_M


def slant_distance(ground: float, altitude: float) -> float:
    """Observer-to-plane distance, assuming the ground below the path is flat."""
    return math.sqrt(altitude * altitude + ground * ground)


def elevation_angle(ground: float, altitude: float) -> float:
    """Angle between the horizon and the plane under the same flat ground assumption.

    Equal to ``atan(altitude / ground)``; a plane straight overhead is at the
    zenith rather than a division by zero.
    """
    return math.atan2(altitude, ground)


def trails_info(altitude: float) -> str:
    """Contrail annotation for a plane flying at ``altitude`` meters.

    Contrails need air colder than -39°C and enough humidity. Below roughly
    30,000 ft the air is too warm, so a plane that low leaves no trails.
    """
    if altitude < CONTRAIL_ALTITUDE_M:
        return NO_TRAILS
    return ""


def interpret_azimuth(angle: float, compass: tuple[str, ...] = COMPASS) -> str:
    """Return the compass point closest to ``angle`` (radians).

    Canonical angles increase with k, so the scan stops as soon as the
    distance grows again. k runs up to len(compass) so that e.g. 358° maps
    back onto compass[0].
    """
    size = len(compass)
    closest = compass[0]
    best = angle
    for k in range(1, size + 1):
        dist = abs(angle - k * 2 * math.pi / size)
        if not dist < best:
            break
        best = dist
        closest = compass[k % size]
    return closest


def compute_sighting(
    observer_lat: float,
    observer_lon: float,
    target_lat: float,
    target_lon: float,
    target_altitude: float,
) -> SightingResult:
    """Compute where an observer should look to see a plane.

    Args:
        observer_lat: Observer latitude in degrees.
        observer_lon: Observer longitude in degrees.
        target_lat: Plane latitude in degrees.
        target_lon: Plane longitude in degrees.
        target_altitude: Plane altitude in meters.

    Returns:
        A SightingResult. NaN inputs yield NaN fields instead of an error.
    """
    lat1, lon1 = to_rad(observer_lat), to_rad(observer_lon)
    lat2, lon2 = to_rad(target_lat), to_rad(target_lon)

    ground = ground_distance(lat1, lon1, lat2, lon2)
    angle = elevation_angle(ground, target_altitude)
    return SightingResult(
        ground_distance=ground,
        elevation_angle=angle,
        slant_distance=slant_distance(ground, target_altitude),
        azimuth=azimuth_between(lat1, lon1, lat2, lon2),
        # Earth isn't flat: keep a 3° margin above the computed horizon
        below_horizon=angle < HORIZON_THRESHOLD_RAD,
        trails=trails_info(target_altitude),
    )


def _rounded(value: float) -> str:
    """Round half up to an integer string, rendering non-finite values the way the page does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return str(math.floor(value + 0.5))


def format_sighting(result: SightingResult) -> str:
    """Render a result as e.g. 'ENE 22° 25km, No trails'."""
    if result.below_horizon:
        return BELOW_HORIZON

    line = (
        f"{interpret_azimuth(result.azimuth)}"
        f" {_rounded(to_deg(result.elevation_angle))}°"
        f" {_rounded(result.slant_distance / 1000)}km"
    )
    if result.trails:
        line += f", {result.trails}"
    return line
