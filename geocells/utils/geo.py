# geocells/utils/geo.py
"""Geohash codec: encode coordinates, decode hashes, compute cell bounds."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Tuple

from .constants import BASE32, BITS_PER_CHAR, GEOHASH_PRECISION
from .validation import validate_geohash, validate_location, validate_precision

MIN_SPAN = 5e-324


@dataclass(frozen=True)
class LatLng:
    """A latitude/longitude pair in decimal degrees."""
    lat: float
    lng: float


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned cell given by its south-west and north-east corners."""
    sw: LatLng
    ne: LatLng

    @property
    def south(self) -> float:
        return self.sw.lat

    @property
    def west(self) -> float:
        return self.sw.lng

    @property
    def north(self) -> float:
        return self.ne.lat

    @property
    def east(self) -> float:
        return self.ne.lng

    @property
    def center(self) -> LatLng:
        return LatLng((self.sw.lat + self.ne.lat) / 2, (self.sw.lng + self.ne.lng) / 2)

    def contains(self, lat: float, lng: float) -> bool:
        """True if (lat, lng) lies inside the cell, boundary included."""
        return self.south <= lat <= self.north and self.west <= lng <= self.east


def encode(lat: float, lng: float, precision: int = GEOHASH_PRECISION) -> str:
    """
    Encode coordinates as a geohash.

    Args:
        lat: Latitude (-90 to 90)
        lng: Longitude (-180 to 180)
        precision: Number of geohash characters, 1 to 22 (default: 10)

    Returns:
        Geohash string

    Raises:
        InvalidLocation: lat/lng out of range or not numbers
        InvalidPrecision: precision not an integer in [1, 22]

    Examples:
        >>> encode(57.64911, 10.40744, precision=11)
        'u4pruydqqvj'
        >>> encode(52.205, 0.1188, precision=7)
        'u120fxw'
    """
    validate_location(lat, lng)
    precision = validate_precision(precision)

    lat_interval = [-90.0, 90.0]
    lng_interval = [-180.0, 180.0]
    ch = 0
    bit = 0
    even = True
    geohash = []

    while len(geohash) < precision:
        value, interval = (lng, lng_interval) if even else (lat, lat_interval)
        mid = (interval[0] + interval[1]) / 2
        if value > mid:
            ch = (ch << 1) + 1
            interval[0] = mid
        else:
            ch = ch << 1
            interval[1] = mid

        even = not even
        if bit < 4:
            bit += 1
        else:
            geohash.append(BASE32[ch])
            bit = 0
            ch = 0
    return "".join(geohash)


def bounds(geohash: str) -> Bounds:
    """
    Return the south-west/north-east bounds of a geohash cell.

    Raises:
        InvalidGeohash: empty string or a character outside the alphabet
    """
    geohash = validate_geohash(geohash)
    return _bounds(geohash)


def _bounds(geohash: str) -> Bounds:
    even = True
    lat_min, lat_max = -90.0, 90.0
    lng_min, lng_max = -180.0, 180.0

    for chr_ in geohash:
        idx = BASE32.index(chr_)
        for n in range(4, -1, -1):
            bit = (idx >> n) & 1
            if even:
                lng_mid = (lng_min + lng_max) / 2
                if bit:
                    lng_min = lng_mid
                else:
                    lng_max = lng_mid
            else:
                lat_mid = (lat_min + lat_max) / 2
                if bit:
                    lat_min = lat_mid
                else:
                    lat_max = lat_mid
            even = not even

    return Bounds(sw=LatLng(lat_min, lng_min), ne=LatLng(lat_max, lng_max))


def _to_fixed(value: float, places: int) -> float:
    # Number.prototype.toFixed semantics: exact binary value, ties away from zero
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = places + 10
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _decimal_places(span: float) -> int:
    return math.floor(2 - math.log(span) / math.log(10))


def _spans(length: int) -> Tuple[float, float]:
    # From bit counts: near +-90/+-180 the float bounds stop moving apart.
    # Clamped to the smallest subnormal for absurdly long hashes.
    bits = length * BITS_PER_CHAR
    lat_bits = bits // 2
    lng_bits = bits - lat_bits
    return (
        max(math.ldexp(180.0, -lat_bits), MIN_SPAN),
        max(math.ldexp(360.0, -lng_bits), MIN_SPAN),
    )


def decode(geohash: str) -> LatLng:
    """
    Decode a geohash to the (approximate) centre of its cell.

    Each axis is rounded to floor(2 - log10(span)) decimal places, enough to
    identify the cell without implying precision it does not have.

    Examples:
        >>> decode('u120fxw')
        LatLng(lat=52.205, lng=0.1188)
    """
    geohash = validate_geohash(geohash)
    centre = _bounds(geohash).center
    lat_span, lng_span = _spans(len(geohash))

    return LatLng(
        lat=_to_fixed(centre.lat, _decimal_places(lat_span)),
        lng=_to_fixed(centre.lng, _decimal_places(lng_span)),
    )
