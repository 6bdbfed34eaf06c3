"""
Clustering parameter resolution for pylocus.

Request handlers receive the clustering parameters as raw query-string values.
This module turns them into validated engine arguments, replacing anything
missing or unusable with the library defaults.
"""

import math
import warnings
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from pylocus.preprocessing.clustering import (
    DEFAULT_MIN_DIST,
    DEFAULT_SPLIT_THRESHOLD,
    DEFAULT_WINDOW_SIZE,
)


@dataclass(frozen=True)
class ClusterParameters:
    """Validated arguments for cluster_locations()."""

    min_dist: float = DEFAULT_MIN_DIST
    window_size: int = DEFAULT_WINDOW_SIZE
    split_threshold: float = DEFAULT_SPLIT_THRESHOLD

    def as_kwargs(self) -> Dict[str, Any]:
        return {
            "min_dist": self.min_dist,
            "window_size": self.window_size,
            "split_threshold": self.split_threshold,
        }


def _parse_number(raw: Any) -> Optional[float]:
    """Parse a query value into a finite float, or None if that is impossible."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def _resolve(query: Mapping[str, Any], key: str, default, accept):
    if key not in query or query[key] is None:
        return default

    value = _parse_number(query[key])
    if value is None or not accept(value):
        warnings.warn(
            f"Ignoring invalid '{key}' value {query[key]!r}; using default {default!r}."
        )
        return default
    return value


def resolve_cluster_parameters(query: Optional[Mapping[str, Any]] = None) -> ClusterParameters:
    """
    Build ClusterParameters from caller-supplied query values.

    Recognized keys are ``minDist`` (meters, >= 0), ``windowSize`` (positive
    integer) and ``splitThreshold`` (fraction in [0, 1]). Values may be numbers
    or strings. A missing value takes its default silently; a supplied value
    that cannot be parsed, is not finite, or is out of range also takes its
    default, with a UserWarning.

    Parameters
    ----------
    query : mapping, optional
        Query parameters, e.g. a request's query dict. None means all defaults.

    Returns
    -------
    ClusterParameters
        Parameters safe to pass to cluster_locations().

    Examples
    --------
    >>> params = resolve_cluster_parameters({"minDist": "50"})
    >>> params.min_dist, params.window_size, params.split_threshold
    (50.0, 5, 0.2)
    """
    query = query or {}

    min_dist = _resolve(query, "minDist", DEFAULT_MIN_DIST, lambda v: v >= 0)
    window_size = _resolve(query, "windowSize", DEFAULT_WINDOW_SIZE,
                           lambda v: v >= 1 and v.is_integer())
    split_threshold = _resolve(query, "splitThreshold", DEFAULT_SPLIT_THRESHOLD,
                               lambda v: 0.0 <= v <= 1.0)

    return ClusterParameters(
        min_dist=float(min_dist),
        window_size=int(window_size),
        split_threshold=float(split_threshold),
    )
