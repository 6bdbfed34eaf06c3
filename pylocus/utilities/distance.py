"""
Great-circle distance module for pylocus.

This module provides the haversine distance used for every proximity decision
in the library. Distances are computed on a sphere of radius 6,371 km, which is
accurate to within ~0.5% of the WGS84 ellipsoid and fast enough to be called
once per trajectory point.
"""

import math
from typing import Union

import numpy as np

# Mean Earth radius in meters
EARTH_RADIUS_M = 6371000.0


def crow_fly_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great-circle distance in meters between two points.

    Uses the atan2 form of the haversine formula, which stays numerically
    stable for coincident and nearly coincident points (identical coordinates
    yield exactly 0.0).

    Parameters
    ----------
    lat1, lon1 : float
        Latitude and longitude of the first point (decimal degrees).
    lat2, lon2 : float
        Latitude and longitude of the second point (decimal degrees).

    Returns
    -------
    float
        Surface distance in meters.

    Examples
    --------
    >>> from pylocus.utilities import crow_fly_distance
    >>> round(crow_fly_distance(37.7749, -122.4194, 34.0522, -118.2437) / 1000)
    559
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = (math.sin(d_phi / 2) ** 2
         + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2)
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def crow_fly_distances(lat: float,
                       lon: float,
                       lats: Union[np.ndarray, list],
                       lons: Union[np.ndarray, list]) -> np.ndarray:
    """
    Vectorized great-circle distances from one origin to many points.

    Same formula as crow_fly_distance(), evaluated with numpy over arrays.

    Parameters
    ----------
    lat, lon : float
        Origin latitude and longitude (decimal degrees).
    lats, lons : array-like
        Target latitudes and longitudes (decimal degrees), same length.

    Returns
    -------
    np.ndarray
        Distances in meters, one per target point. Empty if no targets.
    """
    lats = np.asarray(lats, dtype=float)
    lons = np.asarray(lons, dtype=float)

    phi1 = np.radians(lat)
    phi2 = np.radians(lats)
    d_phi = np.radians(lats - lat)
    d_lambda = np.radians(lons - lon)

    a = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) ** 2
    # clip guards sqrt(1 - a) against a drifting a hair above 1 for antipodal points
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS_M * c
