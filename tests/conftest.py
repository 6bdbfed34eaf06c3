"""Shared pytest fixtures for pylocus tests."""

import math

import pytest

from pylocus.utilities import EARTH_RADIUS_M, Location

# San Francisco, used as the anchor of synthetic traces
BASE_LAT = 37.7749
BASE_LON = -122.4194


@pytest.fixture
def make_location():
    """Factory for Location records with zero altitude and 1 s spacing."""
    def _make(id_, lat, lon, timestamp=None, altitude=0.0):
        return Location(id_, lat, lon, altitude, id_ * 1000 if timestamp is None else timestamp)
    return _make


@pytest.fixture
def north_of():
    """Latitude lying the given number of meters due north of BASE_LAT."""
    def _north(meters, lat=BASE_LAT):
        return lat + math.degrees(meters / EARTH_RADIUS_M)
    return _north


@pytest.fixture
def meridian_trace(make_location, north_of):
    """Build a trace from offsets (meters north of the base point), ids from 1."""
    def _trace(offsets):
        return [make_location(i + 1, north_of(m), BASE_LON) for i, m in enumerate(offsets)]
    return _trace


@pytest.fixture
def glitch_trace(meridian_trace):
    """Nine fixes at one spot, a single 33 m jump (id 10), then five fixes back at the spot."""
    return meridian_trace([0.0] * 9 + [33.0] + [0.0] * 5)
