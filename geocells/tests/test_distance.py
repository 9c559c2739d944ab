"""Tests for haversine distances."""

import math

import numpy as np
import pytest

from geocells.utils.distance import degrees_to_radians, distance, haversine_vectorized
from geocells.utils.geo import LatLng
from geocells.utils.validation import InvalidLocation


class TestDegreesToRadians:
    """Tests for degree/radian conversion."""

    def test_conversion(self):
        assert degrees_to_radians(180) == pytest.approx(math.pi)
        assert degrees_to_radians(-90) == pytest.approx(-math.pi / 2)

    @pytest.mark.parametrize("value", [math.nan, "1", None])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValueError):
            degrees_to_radians(value)


class TestDistance:
    """Tests for the point-to-point haversine distance."""

    def test_one_degree_at_equator(self):
        """One degree of longitude on the equator is ~111.19 km."""
        assert distance((0, 0), (0, 1)) == pytest.approx(111.19, abs=0.01)

    def test_zero_distance(self):
        assert distance((40.7128, -74.0060), (40.7128, -74.0060)) == 0

    def test_new_york_to_london(self):
        """Expected distance is approximately 5570 km."""
        km = distance(LatLng(40.7128, -74.0060), LatLng(51.5074, -0.1278))
        assert 5500 < km < 5600

    def test_symmetric(self):
        a, b = (-37.810146, 144.976332), (52.205, 0.1188)
        assert distance(a, b) == pytest.approx(distance(b, a))

    def test_accepts_mappings(self):
        """Points may be dicts with lat and lng or lon keys."""
        km = distance({"lat": 0, "lng": 0}, {"lat": 0, "lon": 1})
        assert km == pytest.approx(111.19, abs=0.01)

    def test_antipodes(self):
        assert distance((0, 0), (0, 180)) == pytest.approx(math.pi * 6371)

    @pytest.mark.parametrize("point", [(91, 0), (0, 181), {"lat": 0}, "0,0", (1, 2, 3)])
    def test_invalid_points(self, point):
        with pytest.raises(InvalidLocation):
            distance(point, (0, 0))


class TestHaversineVectorized:
    """Tests for vectorized haversine distance calculation."""

    def test_multiple_points_distance(self):
        """Test distance calculation to multiple points."""
        nyc_lat, nyc_lon = 40.7128, -74.0060

        cities_lat = np.array([
            51.5074,  # London
            48.8566,  # Paris
            35.6762   # Tokyo
        ])
        cities_lon = np.array([
            -0.1278,   # London
            2.3522,    # Paris
            139.6503   # Tokyo
        ])

        distances = haversine_vectorized(nyc_lat, nyc_lon, cities_lat, cities_lon)

        assert len(distances) == 3
        assert 5500 < distances[0] < 5600
        assert 5800 < distances[1] < 5900
        assert 10800 < distances[2] < 10900

    def test_matches_scalar_distance(self):
        lats = [0.0, 52.205, -37.810146]
        lngs = [1.0, 0.1188, 144.976332]
        distances = haversine_vectorized(0.0, 0.0, np.array(lats), np.array(lngs))
        for km, lat, lng in zip(distances, lats, lngs):
            assert km == pytest.approx(distance((0, 0), (lat, lng)))
