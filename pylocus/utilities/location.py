"""
Location record for pylocus.

A Location is one recorded position fix as it comes back from storage. The
clustering engine never builds new Locations; it only selects among the ones
it is given.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Location:
    """
    One recorded geolocation fix.

    Attributes
    ----------
    id : int
        Stable ordering key assigned by storage (monotonically increasing).
    latitude : float
        Decimal degrees, -90..90.
    longitude : float
        Decimal degrees, -180..180.
    altitude : float
        Meters, either sign.
    timestamp : int
        Seconds since the epoch.
    """

    id: int
    latitude: float
    longitude: float
    altitude: float
    timestamp: int

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Location":
        """Build a Location from a storage row, coercing numeric fields."""
        return cls(
            id=int(record["id"]),
            latitude=float(record["latitude"]),
            longitude=float(record["longitude"]),
            altitude=float(record["altitude"]),
            timestamp=int(record["timestamp"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
