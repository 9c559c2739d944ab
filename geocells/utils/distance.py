"""Great-circle distances between coordinates."""

import math
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Tuple, Union

import numpy as np

from .constants import EARTH_RADIUS_KM
from .geo import LatLng
from .validation import InvalidLocation, validate_location

Point = Union[LatLng, Tuple[float, float], Mapping]


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    if isinstance(degrees, bool) or not isinstance(degrees, Real) or math.isnan(degrees):
        raise ValueError(f"degrees must be a number, got {degrees!r}")
    return degrees * math.pi / 180


def _coerce_point(point: Point) -> Tuple[float, float]:
    if isinstance(point, LatLng):
        lat, lng = point.lat, point.lng
    elif isinstance(point, Mapping):
        lat = point.get("lat")
        lng = point.get("lng", point.get("lon"))
    elif isinstance(point, Sequence) and not isinstance(point, str) and len(point) == 2:
        lat, lng = point
    else:
        raise InvalidLocation(f"Invalid location {point!r}: expected a (lat, lng) pair")
    validate_location(lat, lng)
    return lat, lng


def distance(point1: Point, point2: Point) -> float:
    """
    Distance in kilometers between two points via the haversine formula.

    Approximate: the earth's radius varies between 6356.752 km and
    6378.137 km, a sphere of 6371 km is used.

    Args:
        point1: LatLng, (lat, lng) pair, or mapping with 'lat' and 'lng'/'lon'
        point2: Same as point1

    Returns:
        Distance in kilometers

    Raises:
        InvalidLocation: either point is not a valid coordinate pair

    Examples:
        >>> round(distance((0, 0), (0, 1)), 2)
        111.19
    """
    lat1, lng1 = _coerce_point(point1)
    lat2, lng2 = _coerce_point(point2)

    lat_delta = degrees_to_radians(lat2 - lat1)
    lng_delta = degrees_to_radians(lng2 - lng1)

    a = (math.sin(lat_delta / 2) * math.sin(lat_delta / 2)) + (
        math.cos(degrees_to_radians(lat1)) * math.cos(degrees_to_radians(lat2))
        * math.sin(lng_delta / 2) * math.sin(lng_delta / 2)
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def haversine_vectorized(
    lat1: float,
    lon1: float,
    lat2_array: np.ndarray,
    lon2_array: np.ndarray
) -> np.ndarray:
    """Calculate distances from one point to many with the haversine formula.

    Same sphere as `distance`, computed with NumPy over whole arrays. Inputs
    are not validated; callers pass coordinates they have already checked.

    Args:
        lat1: Latitude of reference point in decimal degrees
        lon1: Longitude of reference point in decimal degrees
        lat2_array: Array of latitudes to calculate distances to
        lon2_array: Array of longitudes to calculate distances to

    Returns:
        NumPy array of distances in kilometers
    """
    lat1_rad = math.radians(lat1)
    lon1_rad = math.radians(lon1)
    lat2_rad = np.radians(np.asarray(lat2_array, dtype=float))
    lon2_rad = np.radians(np.asarray(lon2_array, dtype=float))

    delta_lat = lat2_rad - lat1_rad
    delta_lon = lon2_rad - lon1_rad

    a = np.sin(delta_lat / 2)**2 + \
        np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(delta_lon / 2)**2
    c = 2 * np.arcsin(np.sqrt(a))

    return EARTH_RADIUS_KM * c
