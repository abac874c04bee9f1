from __future__ import annotations

import math
from typing import Tuple

from cities_browser.core.exceptions import CoordinateParseError

# Wrapping characters that may surround either half of "(lat, lng)"
_WRAPPERS = "()[] \t\"'"


def _parse_token(token: str, raw: str, axis: str) -> float:
    text = token.strip(_WRAPPERS)
    if not text:
        raise CoordinateParseError(f"Empty {axis} in location {raw!r}")
    try:
        value = float(text)
    except ValueError as e:
        raise CoordinateParseError(f"Invalid {axis} {text!r} in location {raw!r}") from e
    if not math.isfinite(value):
        raise CoordinateParseError(f"Non-finite {axis} {text!r} in location {raw!r}")
    return value


def extract_lat_lng(raw: str) -> Tuple[float, float]:
    """
    Parse a GeoLocation string such as "(39.1, -94.5)" into (lat, lng).

    The string must hold exactly one comma. Each half has its wrapping
    parenthesis and surrounding whitespace stripped before parsing, so
    negative numbers and variable precision are handled.

    :raises CoordinateParseError: if the string is not a two-token pair of decimals
    """
    if not isinstance(raw, str):
        raise CoordinateParseError(f"Location must be a string, got {type(raw).__name__}")

    tokens = raw.split(",")
    if len(tokens) != 2:
        raise CoordinateParseError(
            f"Location {raw!r} must contain exactly one comma, found {len(tokens) - 1}"
        )

    lat = _parse_token(tokens[0], raw, "latitude")
    lng = _parse_token(tokens[1], raw, "longitude")
    return lat, lng

