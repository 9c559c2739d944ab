"""Tests for the DataFrame helpers."""

import pandas as pd
import pytest

from geocells.utils.coverage import circle_overlapping_hashes
from geocells.utils.frames import (
    coverage_frame,
    decode_frame,
    distances_from,
    encode_frame,
    neighbour_frame,
)
from geocells.utils.validation import InvalidLocation, InvalidPrecision


@pytest.fixture
def points():
    """A few named coordinates."""
    return pd.DataFrame({
        "name": ["Cambridge", "Melbourne", "Aalborg"],
        "lat": [52.205, -37.810146, 57.64911],
        "lng": [0.1188, 144.976332, 10.40744],
    })


class TestEncodeFrame:
    """Tests for encoding coordinate columns."""

    def test_adds_geohash_column(self, points):
        out = encode_frame(points, precision=7)
        assert out["geohash"].tolist() == ["u120fxw", "r1r0ghb", "u4pruyd"]
        assert "geohash" not in points.columns

    def test_custom_columns(self, points):
        renamed = points.rename(columns={"lat": "latitude", "lng": "longitude"})
        out = encode_frame(renamed, lat_col="latitude", lng_col="longitude", precision=3, column="cell")
        assert out["cell"].tolist() == ["u12", "r1r", "u4p"]

    def test_default_precision_from_environment(self, points, monkeypatch):
        monkeypatch.setenv("GEOCELLS_PRECISION", "5")
        out = encode_frame(points)
        assert all(len(h) == 5 for h in out["geohash"])

    def test_default_precision_is_ten(self, points, monkeypatch):
        monkeypatch.delenv("GEOCELLS_PRECISION", raising=False)
        out = encode_frame(points)
        assert all(len(h) == 10 for h in out["geohash"])

    def test_invalid_row_raises(self, points):
        points.loc[1, "lat"] = 120.0
        with pytest.raises(InvalidLocation):
            encode_frame(points, precision=5)

    def test_missing_value_raises(self, points):
        points.loc[0, "lng"] = float("nan")
        with pytest.raises(InvalidLocation):
            encode_frame(points, precision=5)

    def test_invalid_precision(self, points):
        with pytest.raises(InvalidPrecision):
            encode_frame(points, precision=0)


class TestDecodeFrame:
    """Tests for decoding a geohash column."""

    def test_adds_centre_and_bounds(self):
        df = pd.DataFrame({"geohash": ["u120fxw", "u"]})
        out = decode_frame(df)
        assert list(out.columns) == ["geohash", "lat", "lng", "south", "west", "north", "east"]
        assert out.loc[0, "lat"] == 52.205
        assert out.loc[0, "lng"] == 0.1188
        assert out.loc[1, ["south", "west", "north", "east"]].tolist() == [45.0, 0.0, 90.0, 45.0]

    def test_replaces_existing_coordinate_columns(self, points):
        out = decode_frame(encode_frame(points, precision=7))
        assert list(out.columns).count("lat") == 1
        assert out.loc[0, "lat"] == 52.205


class TestNeighbourFrame:
    """Tests for the 3x3 neighbour grid."""

    def test_grid_layout(self):
        grid = neighbour_frame("gcpuyph")
        assert grid.shape == (3, 3)
        assert grid.loc["middle", "middle"] == "gcpuyph"
        assert grid.loc["north", "middle"] == "gcpuypk"
        assert grid.loc["south", "east"] == "gcpuynv"
        assert grid.loc["north", "west"] == "gcpuyp7"


class TestCoverageFrame:
    """Tests for the coverage table."""

    def test_one_row_per_cell(self):
        frame = coverage_frame(37.7749, -122.4194, 1000)
        assert frame["geohash"].tolist() == circle_overlapping_hashes(37.7749, -122.4194, 1000)
        assert (frame["north"] > frame["south"]).all()
        assert (frame["east"] > frame["west"]).all()


class TestDistancesFrom:
    """Tests for the distance column."""

    def test_adds_distance_column(self, points):
        out = distances_from(52.205, 0.1188, points)
        assert out.loc[0, "distance_km"] == pytest.approx(0.0)
        assert out.loc[1, "distance_km"] > 16000

    def test_invalid_origin(self, points):
        with pytest.raises(InvalidLocation):
            distances_from(100, 0, points)
