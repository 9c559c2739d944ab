"""DataFrame helpers built on the geohash core.

These apply encode/decode/coverage to whole tables of coordinates and return
new DataFrames; input frames are never modified.

Example Usage:
    >>> import pandas as pd
    >>> from geocells.utils.frames import encode_frame
    >>>
    >>> df = pd.DataFrame({"lat": [52.205], "lng": [0.1188]})
    >>> encode_frame(df, precision=7)["geohash"].tolist()
    ['u120fxw']
"""

import logging
from typing import List, Optional

import pandas as pd

from ..config import load_settings
from .adjacency import neighbour_grid
from .coverage import circle_overlapping_hashes
from .distance import haversine_vectorized
from .geo import bounds, decode, encode
from .validation import validate_location, validate_precision

logger = logging.getLogger(__name__)

GRID_ROWS = ["north", "middle", "south"]
GRID_COLUMNS = ["west", "middle", "east"]


def encode_frame(
    df: pd.DataFrame,
    lat_col: str = "lat",
    lng_col: str = "lng",
    precision: Optional[int] = None,
    column: str = "geohash",
) -> pd.DataFrame:
    """Return a copy of `df` with a geohash column for each (lat, lng) row.

    Args:
        df: Frame holding coordinates
        lat_col: Latitude column name
        lng_col: Longitude column name
        precision: Geohash length; the configured default when omitted
        column: Name of the new column

    Raises:
        InvalidLocation: a row holds an invalid coordinate
        InvalidPrecision: precision not an integer in [1, 22]
    """
    if precision is None:
        precision = load_settings().precision
    precision = validate_precision(precision)

    out = df.copy()
    out[column] = [
        encode(float(lat), float(lng), precision)
        for lat, lng in zip(df[lat_col], df[lng_col])
    ]
    logger.debug("Encoded %d rows at precision %d", len(out), precision)
    return out


def decode_frame(df: pd.DataFrame, hash_col: str = "geohash") -> pd.DataFrame:
    """Return a copy of `df` with the centre and bounds of each geohash."""
    rows = []
    for geohash in df[hash_col]:
        centre = decode(geohash)
        cell = bounds(geohash)
        rows.append({
            "lat": centre.lat,
            "lng": centre.lng,
            "south": cell.south,
            "west": cell.west,
            "north": cell.north,
            "east": cell.east,
        })

    decoded = pd.DataFrame(rows, index=df.index, columns=["lat", "lng", "south", "west", "north", "east"])
    out = df.drop(columns=[c for c in decoded.columns if c in df.columns])
    return pd.concat([out, decoded], axis=1)


def neighbour_frame(geohash: str) -> pd.DataFrame:
    """3x3 frame of the cells around `geohash`, north row first, west column first."""
    grid = neighbour_grid(geohash)
    return pd.DataFrame(
        [grid[0:3], grid[3:6], grid[6:9]],
        index=GRID_ROWS,
        columns=GRID_COLUMNS,
    )


def coverage_frame(lat: float, lng: float, radius: float) -> pd.DataFrame:
    """One row per cell covering the circle, with its bounds and centre."""
    hashes: List[str] = circle_overlapping_hashes(lat, lng, radius)
    return decode_frame(pd.DataFrame({"geohash": hashes}))


def distances_from(
    lat: float,
    lng: float,
    df: pd.DataFrame,
    lat_col: str = "lat",
    lng_col: str = "lng",
    column: str = "distance_km",
) -> pd.DataFrame:
    """Return a copy of `df` with the distance in km from (lat, lng) to each row."""
    validate_location(lat, lng)
    for row_lat, row_lng in zip(df[lat_col], df[lng_col]):
        validate_location(float(row_lat), float(row_lng))

    out = df.copy()
    out[column] = haversine_vectorized(
        lat, lng,
        df[lat_col].to_numpy(dtype=float),
        df[lng_col].to_numpy(dtype=float),
    )
    return out
