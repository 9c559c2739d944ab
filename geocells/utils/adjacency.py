"""
Adjacent-cell lookup.

Neighbours are found from the NEIGHBOUR/BORDER character tables rather than
by re-deriving coordinates, so each lookup costs O(len(geohash)).

Cells on the north (south) edge of the world have no northern (southern)
neighbour: asking for one returns the cell itself. East/west lookups wrap
across the antimeridian.
"""

from typing import Dict, List

from .constants import BASE32, BORDER, NEIGHBOUR
from .geo import _bounds
from .validation import validate_direction, validate_geohash


def _adjacent(geohash: str, direction: str) -> str:
    last_ch = geohash[-1]
    parent = geohash[:-1]
    parity = len(geohash) % 2

    # edge cells do not share the parent with their neighbour
    if last_ch in BORDER[direction][parity] and parent:
        parent = _adjacent(parent, direction)

    return parent + BASE32[NEIGHBOUR[direction][parity].index(last_ch)]


def _at_pole(geohash: str, direction: str) -> bool:
    if direction == "n":
        return _bounds(geohash).north >= 90.0
    if direction == "s":
        return _bounds(geohash).south <= -90.0
    return False


def adjacent(geohash: str, direction: str) -> str:
    """
    Return the cell adjacent to `geohash` in `direction` (n, s, e, w).

    Raises:
        InvalidGeohash: empty string or a character outside the alphabet
        InvalidDirection: direction not one of n, s, e, w

    Examples:
        >>> adjacent('gcpuyph', 'n')
        'gcpuypk'
    """
    geohash = validate_geohash(geohash)
    direction = validate_direction(direction)

    if _at_pole(geohash, direction):
        return geohash
    return _adjacent(geohash, direction)


def neighbours(geohash: str) -> Dict[str, str]:
    """Return all 8 cells around `geohash`, keyed n, ne, e, se, s, sw, w, nw."""
    north = adjacent(geohash, "n")
    south = adjacent(geohash, "s")
    return {
        "n": north,
        "ne": adjacent(north, "e"),
        "e": adjacent(geohash, "e"),
        "se": adjacent(south, "e"),
        "s": south,
        "sw": adjacent(south, "w"),
        "w": adjacent(geohash, "w"),
        "nw": adjacent(north, "w"),
    }


def neighbour_list(geohash: str) -> List[str]:
    """Neighbours in reading order [nw, n, ne, w, e, sw, s, se], without the centre."""
    cells = neighbours(geohash)
    return [cells[d] for d in ("nw", "n", "ne", "w", "e", "sw", "s", "se")]


def neighbour_grid(geohash: str) -> List[str]:
    """The 3x3 block around `geohash` in reading order, centre at index 4."""
    grid = neighbour_list(geohash)
    grid.insert(4, validate_geohash(geohash))
    return grid
