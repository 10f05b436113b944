"""Parsing of the flight tracker's text fields and display of user coordinates.

Malformed input never raises here: it comes back as NaN and the caller
decides what to show instead.
"""

import math
import re

FEET_PER_METER = 3.2808
ELLIPSIS = "..."
MAX_COORDINATE_CHARS = 4

_COORDINATE_RE = re.compile(r"-?\d+(?:\.\d+)?", re.ASCII)
_LEADING_INT_RE = re.compile(r"\s*[+-]?\d+", re.ASCII)
_LEADING_FLOAT_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_altitude(text: str) -> float:
    """Convert an altitude such as '10,000 ft' to meters.

    Args:
        text: Altitude in feet, thousands separated by commas.

    Returns:
        The altitude in meters, or NaN if the text has no leading integer.
    """
    token = text.split(" ")[0].replace(",", "")
    match = _LEADING_INT_RE.match(token)
    if match is None:
        return math.nan
    return int(match.group()) / FEET_PER_METER


def parse_coordinate(text: str) -> float:
    """Parse a user-typed coordinate, e.g. '51.4769' or '-0.127'.

    The whole string must be a plain decimal number; anything else,
    including the empty string, gives NaN.
    """
    if _COORDINATE_RE.fullmatch(text) is None:
        return math.nan
    return float(text)


def parse_plane_coordinate(text: str) -> float:
    """Parse the leading number of a tracker latitude/longitude cell, e.g. '51.47°'."""
    match = _LEADING_FLOAT_RE.match(text)
    if match is None:
        return math.nan
    return float(match.group())


def _number_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value):
        return str(int(value))
    return repr(value)


def reduce_coordinate(coordinate: float | str) -> str:
    """Render a coordinate in at most 4 characters, e.g. 3.14159265 -> '3.14...'.

    Display only: the result is lossy and is never parsed back.
    """
    text = coordinate if isinstance(coordinate, str) else _number_text(coordinate)
    if len(text) > MAX_COORDINATE_CHARS:
        text = text[:MAX_COORDINATE_CHARS] + ELLIPSIS
    return text
