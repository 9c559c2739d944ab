"""geocells: geohash encoding, adjacency and circle coverage.

    >>> import geocells
    >>> geocells.encode(57.64911, 10.40744, 11)
    'u4pruydqqvj'
"""

from .utils import (
    Bounds,
    GeohashError,
    InvalidDirection,
    InvalidGeohash,
    InvalidLocation,
    InvalidPrecision,
    InvalidRadius,
    LatLng,
    adjacent,
    bounds,
    circle_overlapping_hashes,
    decode,
    distance,
    encode,
    neighbour_list,
    neighbours,
)

__version__ = "0.1.0"

__all__ = [
    'Bounds',
    'GeohashError',
    'InvalidDirection',
    'InvalidGeohash',
    'InvalidLocation',
    'InvalidPrecision',
    'InvalidRadius',
    'LatLng',
    'adjacent',
    'bounds',
    'circle_overlapping_hashes',
    'decode',
    'distance',
    'encode',
    'neighbour_list',
    'neighbours',
]
