#!/usr/bin/env python3
"""
Geohash Explorer - command-line companion to the geocells library.

Inspect a location as geohash cells: encode and decode, cell bounds, the 3x3
neighbour block, the cells covering a circle, distances, and batch encoding of
a CSV of coordinates.

Usage:
    # Encode a location
    geocells encode 52.205 0.1188 -p 7

    # Decode a geohash and show its bounds
    geocells decode u120fxw
    geocells bounds u120fxw

    # Neighbour grid
    geocells neighbours gcpuyph

    # Cells covering a 1 km circle
    geocells cover 37.7749 -122.4194 1000

    # Distance in km
    geocells distance 0 0 0 1

    # Add a geohash column to a CSV
    geocells batch points.csv points_hashed.csv --lat-col latitude --lng-col longitude
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .config import load_settings
from .utils.adjacency import neighbour_grid, neighbours
from .utils.coverage import circle_overlapping_hashes
from .utils.distance import distance
from .utils.frames import coverage_frame, encode_frame, neighbour_frame
from .utils.geo import bounds, decode, encode
from .utils.validation import GeohashError

logger = logging.getLogger(__name__)


# =============================================================================
# OUTPUT
# =============================================================================

def print_header(title: str):
    """Print a formatted header."""
    width = 60
    print("\n" + "=" * width)
    print(f"  {title}")
    print("=" * width + "\n")


def emit(payload, as_json: bool, render):
    """Print `payload` as JSON, or through `render` as text."""
    if as_json:
        print(json.dumps(payload, indent=2))
    else:
        render(payload)


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_encode(args) -> int:
    precision = args.precision if args.precision is not None else load_settings().precision
    geohash = encode(args.lat, args.lng, precision)
    centre = decode(geohash)
    payload = {"geohash": geohash, "precision": len(geohash), "lat": centre.lat, "lng": centre.lng}
    emit(payload, args.json, lambda p: print(p["geohash"]))
    return 0


def cmd_decode(args) -> int:
    centre = decode(args.geohash)
    payload = {"geohash": args.geohash.lower(), "lat": centre.lat, "lng": centre.lng}
    emit(payload, args.json, lambda p: print(f"{p['lat']}, {p['lng']}"))
    return 0


def cmd_bounds(args) -> int:
    cell = bounds(args.geohash)
    payload = {
        "geohash": args.geohash.lower(),
        "sw": {"lat": cell.south, "lng": cell.west},
        "ne": {"lat": cell.north, "lng": cell.east},
    }

    def render(p):
        print(f"  SW: {p['sw']['lat']}, {p['sw']['lng']}")
        print(f"  NE: {p['ne']['lat']}, {p['ne']['lng']}")

    emit(payload, args.json, render)
    return 0


def cmd_neighbours(args) -> int:
    if args.json:
        payload = {"geohash": args.geohash.lower(), "neighbours": neighbours(args.geohash),
                   "grid": neighbour_grid(args.geohash)}
        emit(payload, True, None)
        return 0

    print_header(f"Neighbours of {args.geohash.lower()}")
    print(neighbour_frame(args.geohash).to_string())
    return 0


def cmd_cover(args) -> int:
    if args.json:
        payload = {"lat": args.lat, "lng": args.lng, "radius": args.radius,
                   "geohashes": circle_overlapping_hashes(args.lat, args.lng, args.radius)}
        emit(payload, True, None)
        return 0

    frame = coverage_frame(args.lat, args.lng, args.radius)
    print_header(f"{len(frame)} cells cover {args.radius:g} m around ({args.lat}, {args.lng})")
    print(frame.to_string(index=False))
    return 0


def cmd_distance(args) -> int:
    km = distance((args.lat1, args.lng1), (args.lat2, args.lng2))
    emit({"distance_km": km}, args.json, lambda p: print(f"{p['distance_km']:.3f} km"))
    return 0


def cmd_batch(args) -> int:
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: input file not found: {input_path}", file=sys.stderr)
        return 1

    df = pd.read_csv(input_path)
    missing = [c for c in (args.lat_col, args.lng_col) if c not in df.columns]
    if missing:
        print(f"Error: {input_path} has no column(s): {', '.join(missing)}", file=sys.stderr)
        return 1

    out = encode_frame(df, lat_col=args.lat_col, lng_col=args.lng_col, precision=args.precision)

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    out.to_csv(output_path, index=False)

    logger.info("Wrote %d rows to %s", len(out), output_path)
    emit({"rows": len(out), "output": str(output_path)}, args.json,
         lambda p: print(f"✓ Encoded {p['rows']:,} rows → {p['output']}"))
    return 0


# =============================================================================
# MAIN
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='geocells',
        description='Explore locations as geohash cells',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  geocells encode 52.205 0.1188 -p 7
  geocells neighbours gcpuyph
  geocells cover 37.7749 -122.4194 1000 --json
        """
    )
    parser.add_argument('--json', action='store_true', help='Print JSON instead of text')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('encode', help='Encode a location as a geohash')
    p.add_argument('lat', type=float)
    p.add_argument('lng', type=float)
    p.add_argument('--precision', '-p', type=int, help='Geohash length (default: GEOCELLS_PRECISION or 10)')
    p.set_defaults(func=cmd_encode)

    p = sub.add_parser('decode', help='Decode a geohash to its centre point')
    p.add_argument('geohash')
    p.set_defaults(func=cmd_decode)

    p = sub.add_parser('bounds', help='Show the bounds of a geohash cell')
    p.add_argument('geohash')
    p.set_defaults(func=cmd_bounds)

    p = sub.add_parser('neighbours', help='Show the 3x3 block of cells around a geohash')
    p.add_argument('geohash')
    p.set_defaults(func=cmd_neighbours)

    p = sub.add_parser('cover', help='List the cells covering a circle')
    p.add_argument('lat', type=float)
    p.add_argument('lng', type=float)
    p.add_argument('radius', type=float, help='Radius in meters')
    p.set_defaults(func=cmd_cover)

    p = sub.add_parser('distance', help='Haversine distance in km between two points')
    p.add_argument('lat1', type=float)
    p.add_argument('lng1', type=float)
    p.add_argument('lat2', type=float)
    p.add_argument('lng2', type=float)
    p.set_defaults(func=cmd_distance)

    p = sub.add_parser('batch', help='Add a geohash column to a CSV of coordinates')
    p.add_argument('input', help='Input CSV')
    p.add_argument('output', help='Output CSV')
    p.add_argument('--lat-col', default='lat', help='Latitude column (default: lat)')
    p.add_argument('--lng-col', default='lng', help='Longitude column (default: lng)')
    p.add_argument('--precision', '-p', type=int, help='Geohash length (default: GEOCELLS_PRECISION or 10)')
    p.set_defaults(func=cmd_batch)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except GeohashError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level_number,
        format='%(levelname)s: %(message)s'
    )

    try:
        return args.func(args)
    except GeohashError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
