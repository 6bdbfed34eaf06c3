"""
Trajectory preprocessing module for pylocus.

This module provides algorithms for thinning dense GPS traces:
- Clustering: Windowed, noise-tolerant downsampling of ordered location traces
- Parameters: Resolution of caller-supplied clustering parameters
"""

# Clustering
from pylocus.preprocessing.clustering import (
    DEFAULT_MIN_DIST,
    DEFAULT_SPLIT_THRESHOLD,
    DEFAULT_WINDOW_SIZE,
    cluster_locations,
    cluster_trajectory,
    downsample,
)

# Parameters
from pylocus.preprocessing.parameters import ClusterParameters, resolve_cluster_parameters

__all__ = [
    # Clustering
    'cluster_locations',
    'cluster_trajectory',
    'downsample',
    'DEFAULT_MIN_DIST',
    'DEFAULT_WINDOW_SIZE',
    'DEFAULT_SPLIT_THRESHOLD',
    # Parameters
    'ClusterParameters',
    'resolve_cluster_parameters',
]
