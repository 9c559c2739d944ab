"""Geohash utilities.

This package provides:
- Validation and the error taxonomy
- Geohash encode/decode and cell bounds
- Adjacent cells and neighbour sets
- Circle coverage (covering cells for a radius query)
- Haversine distances
- DataFrame helpers over all of the above
"""

from .adjacency import adjacent, neighbour_grid, neighbour_list, neighbours
from .coverage import (
    bounding_box_bits,
    bounding_box_coordinates,
    circle_overlapping_hashes,
    geohash_query,
    latitude_bits_for_resolution,
    longitude_bits_for_resolution,
    meters_to_longitude_degrees,
    wrap_longitude,
)
from .distance import degrees_to_radians, distance, haversine_vectorized
from .geo import Bounds, LatLng, bounds, decode, encode
from .validation import (
    GeohashError,
    InvalidDirection,
    InvalidGeohash,
    InvalidLocation,
    InvalidPrecision,
    InvalidRadius,
    validate_direction,
    validate_geohash,
    validate_location,
    validate_precision,
    validate_radius,
)

__all__ = [
    'adjacent',
    'neighbour_grid',
    'neighbour_list',
    'neighbours',
    'bounding_box_bits',
    'bounding_box_coordinates',
    'circle_overlapping_hashes',
    'geohash_query',
    'latitude_bits_for_resolution',
    'longitude_bits_for_resolution',
    'meters_to_longitude_degrees',
    'wrap_longitude',
    'degrees_to_radians',
    'distance',
    'haversine_vectorized',
    'Bounds',
    'LatLng',
    'bounds',
    'decode',
    'encode',
    'GeohashError',
    'InvalidDirection',
    'InvalidGeohash',
    'InvalidLocation',
    'InvalidPrecision',
    'InvalidRadius',
    'validate_direction',
    'validate_geohash',
    'validate_location',
    'validate_precision',
    'validate_radius',
]
