"""
pylocus - A Python library for thinning GPS location traces.

pylocus downsamples dense, chronologically ordered location traces into a
sparse sequence of real, representative points that still follows the path,
without letting transient GPS jumps fragment it.

Components
----------
- **preprocessing**: Windowed clustering engine and parameter resolution
- **utilities**: Great-circle distance and the Location record

Quick Start
-----------
```python
import pylocus as plc

# Records from storage, sorted by timestamp
trace = [plc.utilities.Location.from_record(row) for row in rows]

# Resolve request parameters and thin the trace
params = plc.preprocessing.resolve_cluster_parameters({"minDist": "50"})
path = plc.preprocessing.cluster_locations(trace, **params.as_kwargs())

# Or work on a DataFrame directly
thinned = plc.preprocessing.cluster_trajectory(df, min_dist=50)
```
"""

from pylocus._version import __version__, __version_info__
from pylocus import preprocessing, utilities

__all__ = [
    '__version__',
    '__version_info__',
    'preprocessing',
    'utilities',
]
