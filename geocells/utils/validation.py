"""
Input validation and the geocells error taxonomy.

Every public operation validates its own arguments with one of the helpers
below and fails fast; internal helpers assume validated input.

    >>> validate_location(91, 0)
    Traceback (most recent call last):
    ...
    geocells.utils.validation.InvalidLocation: Invalid location (91, 0): latitude must be within the range [-90, 90]
"""

import math
from numbers import Real

from .constants import BASE32, DIRECTIONS, MAX_PRECISION


class GeohashError(ValueError):
    """Base class for every error raised by geocells."""


class InvalidLocation(GeohashError):
    """Latitude/longitude out of range or not a number."""


class InvalidGeohash(GeohashError):
    """Empty geohash or one containing a character outside the alphabet."""


class InvalidPrecision(GeohashError):
    """Precision outside [1, 22] or not an integer."""


class InvalidDirection(GeohashError):
    """Direction other than n, s, e or w."""


class InvalidRadius(GeohashError):
    """Radius that is negative, infinite or not a number."""


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_location(lat, lng) -> None:
    """Raise InvalidLocation unless (lat, lng) is a valid coordinate pair."""
    error = None

    if not _is_number(lat) or math.isnan(lat):
        error = "latitude must be a number"
    elif not -90 <= lat <= 90:
        error = "latitude must be within the range [-90, 90]"
    elif not _is_number(lng) or math.isnan(lng):
        error = "longitude must be a number"
    elif not -180 <= lng <= 180:
        error = "longitude must be within the range [-180, 180]"

    if error is not None:
        raise InvalidLocation(f"Invalid location ({lat!r}, {lng!r}): {error}")


def validate_geohash(geohash) -> str:
    """Raise InvalidGeohash for a bad geohash, otherwise return it lowercased."""
    if not isinstance(geohash, str):
        raise InvalidGeohash(f"Invalid geohash {geohash!r}: geohash must be a string")
    if not geohash:
        raise InvalidGeohash("Invalid geohash '': geohash cannot be the empty string")

    canonical = geohash.lower()
    for letter in canonical:
        if letter not in BASE32:
            raise InvalidGeohash(f"Invalid geohash {geohash!r}: geohash cannot contain {letter!r}")
    return canonical


def validate_precision(precision) -> int:
    """Raise InvalidPrecision unless precision is an integer in [1, 22].

    Integral floats (``7.0``) are accepted and returned as ``int``.
    """
    if not _is_number(precision) or math.isnan(precision):
        raise InvalidPrecision(f"Invalid precision {precision!r}: precision must be a number")
    if precision <= 0:
        raise InvalidPrecision(f"Invalid precision {precision!r}: precision must be greater than 0")
    if precision > MAX_PRECISION:
        raise InvalidPrecision(
            f"Invalid precision {precision!r}: precision cannot be greater than {MAX_PRECISION}"
        )
    if int(precision) != precision:
        raise InvalidPrecision(f"Invalid precision {precision!r}: precision must be an integer")
    return int(precision)


def validate_direction(direction) -> str:
    """Raise InvalidDirection unless direction is n/s/e/w; return it lowercased."""
    if isinstance(direction, str) and direction.lower() in DIRECTIONS:
        return direction.lower()
    raise InvalidDirection(f"Invalid direction {direction!r}: direction must be one of n, s, e, w")


def validate_radius(radius) -> None:
    """Raise InvalidRadius unless radius is a finite, non-negative number of meters."""
    if not _is_number(radius) or not math.isfinite(radius):
        raise InvalidRadius(f"Invalid radius {radius!r}: radius must be a finite number")
    if radius < 0:
        raise InvalidRadius(f"Invalid radius {radius!r}: radius must be non-negative")
