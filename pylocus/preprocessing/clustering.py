"""
Trajectory clustering module for pylocus.

This module downsamples dense GPS traces for display and storage. Consecutive
points that stay near the running centroid of the current cluster are merged,
and each finished cluster is replaced by the real point closest to its
centroid. Before a far point is allowed to start a new cluster, a short
lookahead window checks whether the following points confirm the jump, so a
single GPS glitch does not fragment the path.
"""

import math
from typing import Any, Iterable, List, Mapping, Union

import numpy as np
import pandas as pd
import polars as pl

from pylocus.utilities.distance import crow_fly_distance, crow_fly_distances


DEFAULT_MIN_DIST = 20.0
DEFAULT_WINDOW_SIZE = 5
DEFAULT_SPLIT_THRESHOLD = 0.2


# ======================== Helper Functions ========================


def _validate_parameters(min_dist: float, window_size: int, split_threshold: float) -> None:
    """Raise ValueError for parameters outside the engine's domain."""
    if not min_dist >= 0:
        raise ValueError(f"min_dist must be non-negative, got {min_dist!r}")
    if not math.isfinite(window_size) or int(window_size) != window_size or window_size < 1:
        raise ValueError(f"window_size must be a positive integer, got {window_size!r}")
    if not 0.0 <= split_threshold <= 1.0:
        raise ValueError(f"split_threshold must be within [0, 1], got {split_threshold!r}")


def _coordinate(record: Any, name: str) -> float:
    # storage rows arrive either as mappings or as Location-like objects
    if isinstance(record, Mapping):
        return float(record[name])
    return float(getattr(record, name))


def _finalize_cluster(lats: np.ndarray, lons: np.ndarray, start: int, stop: int) -> int:
    """
    Pick the representative of the closed cluster lats[start:stop].

    The centroid is recomputed from the full member set here rather than taken
    from the running sums used while the cluster was open; the recomputed one
    is authoritative for the choice of representative.

    Returns
    -------
    int
        Index (into lats/lons) of the member closest to the centroid. The first
        such member wins ties.
    """
    member_lats = lats[start:stop]
    member_lons = lons[start:stop]
    cen_lat = float(member_lats.mean())
    cen_lon = float(member_lons.mean())

    dists = crow_fly_distances(cen_lat, cen_lon, member_lats, member_lons)
    # np.argmin returns the first occurrence of the minimum
    return start + int(np.argmin(dists))


def _cluster_indices(lats: np.ndarray,
                     lons: np.ndarray,
                     min_dist: float,
                     window_size: int,
                     split_threshold: float) -> List[int]:
    """
    Run the clustering state machine over coordinate arrays.

    Clusters are always contiguous runs of the input, so the open cluster is
    tracked as a start index plus running latitude/longitude sums.

    Returns
    -------
    list of int
        Ascending indices of the representative points, one per cluster.
    """
    n = len(lats)
    if n == 0:
        return []

    representatives = []

    # the first point always opens a cluster
    start = 0
    sum_lat = float(lats[0])
    sum_lon = float(lons[0])

    for i in range(1, n):
        plat = float(lats[i])
        plon = float(lons[i])

        size = i - start
        cen_lat = sum_lat / size
        cen_lon = sum_lon / size
        d = crow_fly_distance(cen_lat, cen_lon, plat, plon)

        if d >= min_dist:
            # Candidate split: look at the next window_size points (starting at
            # this one) and count how many are also far from the same centroid.
            # The window is measured with the same function as d, and this
            # point counts as far.
            stop = min(i + window_size, n)
            far_count = 1
            for j in range(i + 1, stop):
                if crow_fly_distance(cen_lat, cen_lon, float(lats[j]), float(lons[j])) >= min_dist:
                    far_count += 1
            far_fraction = far_count / (stop - i)

            if far_fraction >= split_threshold:
                representatives.append(_finalize_cluster(lats, lons, start, i))
                start = i
                sum_lat = plat
                sum_lon = plon
                continue

            # Not corroborated: treat as noise and absorb into the current cluster

        sum_lat += plat
        sum_lon += plon

    representatives.append(_finalize_cluster(lats, lons, start, n))
    return representatives


# ======================== Main Clustering Functions ========================


def cluster_locations(locations: Iterable[Any],
                      min_dist: float = DEFAULT_MIN_DIST,
                      window_size: int = DEFAULT_WINDOW_SIZE,
                      split_threshold: float = DEFAULT_SPLIT_THRESHOLD) -> List[Any]:
    """
    Downsample an ordered location trace to one representative per cluster.

    The trace is walked once, front to back. Each point is compared with the
    running centroid (mean latitude, mean longitude) of the open cluster:

    - closer than ``min_dist``: the point joins the cluster;
    - ``min_dist`` or farther: the next ``window_size`` points, starting with
      this one, are checked against the same centroid. If at least
      ``split_threshold`` of them are also far, the cluster is closed and the
      point opens a new one. Otherwise the point is treated as GPS noise and
      joins the current cluster anyway.

    When a cluster closes, the member closest to its centroid is emitted.

    Parameters
    ----------
    locations : iterable of Location or mapping
        Points sorted ascending by id/timestamp. Each item needs ``latitude``
        and ``longitude``, either as attributes (e.g. Location) or as mapping
        keys (e.g. a storage row).
    min_dist : float, default=20
        Distance threshold in meters. 0 disables merging entirely: every point
        becomes its own cluster.
    window_size : int, default=5
        Number of upcoming points (the far point included) examined before
        splitting. Windows are truncated at the end of the trace.
    split_threshold : float, default=0.2
        Minimum fraction of the lookahead window that must be far from the
        centroid to confirm a real break.

    Returns
    -------
    list
        Representative points in input order. Each is one of the input objects,
        returned unmodified. Empty if the input is empty.

    Raises
    ------
    ValueError
        If min_dist is negative, window_size is not a positive integer, or
        split_threshold is outside [0, 1].

    Examples
    --------
    >>> from pylocus.utilities import Location
    >>> from pylocus.preprocessing import cluster_locations
    >>> trace = [
    ...     Location(1, 37.7748, -122.4194, 0.0, 1000),
    ...     Location(2, 37.7749, -122.4194, 0.0, 2000),
    ...     Location(3, 37.7750, -122.4194, 0.0, 3000),
    ... ]
    >>> [loc.id for loc in cluster_locations(trace, min_dist=500)]
    [2]

    Notes
    -----
    **Complexity:** O(n * window_size) distance evaluations in the worst case,
    O(1) work per absorbed point.

    **Noise tolerance:** the window always contains the far point itself, so
    with the defaults (5 points, 0.2) a single outlier is enough to split.
    Raise ``split_threshold`` above ``1 / window_size`` to require
    corroboration from the points that follow.

    **Not idempotent:** feeding the output back in may merge it further,
    because representatives sit closer together than the clusters they came
    from.
    """
    _validate_parameters(min_dist, window_size, split_threshold)

    records = list(locations)
    if not records:
        return []

    lats = np.fromiter((_coordinate(r, "latitude") for r in records), dtype=float, count=len(records))
    lons = np.fromiter((_coordinate(r, "longitude") for r in records), dtype=float, count=len(records))

    indices = _cluster_indices(lats, lons, float(min_dist), int(window_size), float(split_threshold))
    return [records[idx] for idx in indices]


# Name used by the API layer
downsample = cluster_locations


def cluster_trajectory(df: Union[pd.DataFrame, pl.DataFrame],
                       min_dist: float = DEFAULT_MIN_DIST,
                       window_size: int = DEFAULT_WINDOW_SIZE,
                       split_threshold: float = DEFAULT_SPLIT_THRESHOLD,
                       lat_col: str = "lat",
                       lon_col: str = "lon") -> Union[pd.DataFrame, pl.DataFrame]:
    """
    Downsample a trajectory DataFrame with the windowed clustering engine.

    DataFrame counterpart of cluster_locations(). Rows are selected, never
    aggregated: every output row is an input row with all of its columns
    untouched.

    Parameters
    ----------
    df : pd.DataFrame or pl.DataFrame
        Trajectory sorted in time order.
    min_dist : float, default=20
        Distance threshold in meters.
    window_size : int, default=5
        Lookahead window length in points.
    split_threshold : float, default=0.2
        Fraction of the window that must be far to confirm a split.
    lat_col : str, default="lat"
        Name of the latitude column (decimal degrees).
    lon_col : str, default="lon"
        Name of the longitude column (decimal degrees).

    Returns
    -------
    pd.DataFrame or pl.DataFrame
        The representative rows in input order, same type as the input.
        pandas results keep the original index labels.

    Raises
    ------
    ValueError
        If lat_col or lon_col is missing, or a parameter is out of range.

    Examples
    --------
    >>> import pandas as pd
    >>> import pylocus as plc
    >>> df = pd.read_csv('trace.csv')
    >>> thinned = plc.preprocessing.cluster_trajectory(df, min_dist=50)
    """
    _validate_parameters(min_dist, window_size, split_threshold)

    if lat_col not in df.columns or lon_col not in df.columns:
        raise ValueError("lat_col and lon_col must exist in the DataFrame")

    # Handle empty DataFrame
    if isinstance(df, pl.DataFrame):
        if len(df) == 0:
            return df.clone()
    elif df.shape[0] == 0:
        return df.copy()

    lats = df[lat_col].to_numpy().astype(float)
    lons = df[lon_col].to_numpy().astype(float)

    indices = _cluster_indices(lats, lons, float(min_dist), int(window_size), float(split_threshold))

    if isinstance(df, pl.DataFrame):
        return df[indices]
    return df.iloc[indices].copy()
