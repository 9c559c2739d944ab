"""
Circle coverage: the set of geohash cells that together cover a circle.

The circle is approximated by its bounding box. The box size fixes a bit
depth at which a cell is at least as large as the radius; at that depth, one of
nine sample points on the box (centre, edges, corners) shares its cell with any
point inside the circle. Each sample point's cell becomes a half-open range of
geohash strings, and every string in those ranges is a covering cell.

Example:
    >>> from geocells.utils.coverage import circle_overlapping_hashes
    >>> cells = circle_overlapping_hashes(37.7749, -122.4194, 1000)
    >>> all(len(cell) == 6 for cell in cells)
    True
"""

import logging
import math
from typing import List, Tuple

from .constants import (
    BASE32,
    BITS_PER_CHAR,
    E2,
    EARTH_EQ_RADIUS,
    EARTH_MERI_CIRCUMFERENCE,
    EPSILON,
    MAXIMUM_BITS_PRECISION,
    METERS_PER_DEGREE_LATITUDE,
    RANGE_SENTINEL,
)
from .distance import degrees_to_radians
from .geo import encode
from .validation import validate_geohash, validate_location, validate_radius

logger = logging.getLogger(__name__)


def meters_to_longitude_degrees(distance: float, latitude: float) -> float:
    """Degrees of longitude spanned by `distance` meters at `latitude`."""
    radians = degrees_to_radians(latitude)
    num = math.cos(radians) * EARTH_EQ_RADIUS * math.pi / 180
    denom = 1 / math.sqrt(1 - E2 * math.sin(radians) * math.sin(radians))
    delta_deg = num * denom
    if delta_deg < EPSILON:
        return 360.0 if distance > 0 else 0.0
    return min(360.0, distance / delta_deg)


def longitude_bits_for_resolution(resolution: float, latitude: float) -> float:
    """Bits of longitude needed for a cell `resolution` meters wide at `latitude`."""
    degs = meters_to_longitude_degrees(resolution, latitude)
    return max(1.0, math.log2(360 / degs)) if abs(degs) > 0.000001 else 1.0


def latitude_bits_for_resolution(resolution: float) -> float:
    """Bits of latitude needed for a cell `resolution` meters tall."""
    if resolution <= 0:
        return float(MAXIMUM_BITS_PRECISION)
    return min(math.log2(EARTH_MERI_CIRCUMFERENCE / 2 / resolution), MAXIMUM_BITS_PRECISION)


def wrap_longitude(longitude: float) -> float:
    """Wrap a longitude into [-180, 180]."""
    if -180 <= longitude <= 180:
        return longitude
    adjusted = longitude + 180
    if adjusted > 0:
        return math.fmod(adjusted, 360) - 180
    return 180 - math.fmod(-adjusted, 360)


def bounding_box_bits(lat: float, lng: float, size: float) -> int:
    """
    Largest bit depth at which a geohash cell around (lat, lng) is still at
    least `size` meters on each side.

    Longitude bits are counted one short of the latitude bits because the
    first bit of a geohash is a longitude bit.
    """
    lat_delta_degrees = size / METERS_PER_DEGREE_LATITUDE
    latitude_north = min(90.0, lat + lat_delta_degrees)
    latitude_south = max(-90.0, lat - lat_delta_degrees)
    bits_lat = math.floor(latitude_bits_for_resolution(size)) * 2
    bits_long_north = math.floor(longitude_bits_for_resolution(size, latitude_north)) * 2 - 1
    bits_long_south = math.floor(longitude_bits_for_resolution(size, latitude_south)) * 2 - 1
    return min(bits_lat, bits_long_north, bits_long_south, MAXIMUM_BITS_PRECISION)


def bounding_box_coordinates(lat: float, lng: float, radius: float) -> List[Tuple[float, float]]:
    """
    Nine points on the bounding box of a circle: centre, then the centre,
    north and south rows, each as (middle, west, east).
    """
    lat_degrees = radius / METERS_PER_DEGREE_LATITUDE
    latitude_north = min(90.0, lat + lat_degrees)
    latitude_south = max(-90.0, lat - lat_degrees)
    long_degs_north = meters_to_longitude_degrees(radius, latitude_north)
    long_degs_south = meters_to_longitude_degrees(radius, latitude_south)
    long_degs = max(long_degs_north, long_degs_south)
    west = wrap_longitude(lng - long_degs)
    east = wrap_longitude(lng + long_degs)
    return [
        (lat, lng),
        (lat, west),
        (lat, east),
        (latitude_north, lng),
        (latitude_north, west),
        (latitude_north, east),
        (latitude_south, lng),
        (latitude_south, west),
        (latitude_south, east),
    ]


def geohash_query(geohash: str, bits: int) -> Tuple[str, str]:
    """
    Half-open range [start, end) of geohash strings sharing the first `bits`
    bits of `geohash`.

    Examples:
        >>> geohash_query('9q8yyk', 27)
        ('9q8yyh', '9q8yys')
        >>> geohash_query('9q', 27)
        ('9q', '9q~')
    """
    geohash = validate_geohash(geohash)
    precision = math.ceil(bits / BITS_PER_CHAR)
    if len(geohash) < precision:
        return geohash, geohash + RANGE_SENTINEL

    geohash = geohash[:precision]
    base = geohash[:-1]
    last_value = BASE32.index(geohash[-1])
    significant_bits = bits - len(base) * BITS_PER_CHAR
    unused_bits = BITS_PER_CHAR - significant_bits

    start_value = (last_value >> unused_bits) << unused_bits
    end_value = start_value + (1 << unused_bits)
    if end_value > 31:
        return base + BASE32[start_value], base + RANGE_SENTINEL
    return base + BASE32[start_value], base + BASE32[end_value]


def _successor(current: str, end: str) -> str:
    if len(current) < len(end):
        return current + BASE32[0]
    idx = BASE32.index(current[-1])
    if idx + 1 < len(BASE32):
        return current[:-1] + BASE32[idx + 1]
    return current[:-1] + RANGE_SENTINEL


def _expand_range(start: str, end: str):
    current = start
    while current < end:
        yield current
        current = _successor(current, end)


def circle_overlapping_hashes(lat: float, lng: float, radius: float) -> List[str]:
    """
    Geohash cells that together cover the circle of `radius` meters around
    (lat, lng).

    Points inside the circle encode, at the length of the returned hashes, to
    one of them, except near a pole. Once the circle's bounding box reaches
    +-90 the longitude span is a full turn, so all nine sample points share
    the centre's longitude and only the 1-bit half of the world holding the
    centre is returned. Points past the pole in the other half are missed.
    Order is first appearance across the nine bounding box ranges.

    Raises:
        InvalidLocation: lat/lng out of range
        InvalidRadius: negative or non-finite radius
    """
    validate_location(lat, lng)
    validate_radius(radius)

    bits = max(1, bounding_box_bits(lat, lng, radius))
    precision = math.ceil(bits / BITS_PER_CHAR)

    queries = [
        geohash_query(encode(point_lat, point_lng, precision), bits)
        for point_lat, point_lng in bounding_box_coordinates(lat, lng, radius)
    ]

    seen = set()
    hashes = []
    for start, end in queries:
        for cell in _expand_range(start, end):
            if cell not in seen:
                seen.add(cell)
                hashes.append(cell)

    logger.debug(
        "Circle (%s, %s) r=%sm: %d bits, precision %d, %d cells",
        lat, lng, radius, bits, precision, len(hashes),
    )
    return hashes
