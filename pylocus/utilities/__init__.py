"""
Utilities module for the pylocus library.

This module provides the great-circle distance functions and the Location
record shared by the preprocessing algorithms.
"""

from pylocus.utilities.distance import EARTH_RADIUS_M, crow_fly_distance, crow_fly_distances
from pylocus.utilities.location import Location

__all__ = [
    # Distance functions
    'EARTH_RADIUS_M',
    'crow_fly_distance',
    'crow_fly_distances',
    # Records
    'Location',
]
