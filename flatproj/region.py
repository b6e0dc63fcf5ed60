from dataclasses import dataclass
from typing import Iterable

from .errors import RegionError
from .projection import Projector


@dataclass(frozen=True)
class Region:
    """
    Bounding extents of an area of interest, in degrees.
    Used to choose a reference latitude (and optionally longitude).
    """
    south: float
    west: float
    north: float
    east: float

    def __post_init__(self):
        if self.south > self.north:
            raise RegionError(f"south ({self.south}) is north of north ({self.north})")
        if self.west > self.east:
            raise RegionError(f"west ({self.west}) is east of east ({self.east})")

    @classmethod
    def from_points(cls, points: Iterable[tuple[float, float]]) -> "Region":
        """Bounding extents of (lon, lat) pairs."""
        pts = list(points)
        if not pts:
            raise RegionError("cannot build a region from zero points")
        lons = [p[0] for p in pts]
        lats = [p[1] for p in pts]
        return cls(south=min(lats), west=min(lons), north=max(lats), east=max(lons))

    @property
    def center(self) -> tuple[float, float]:
        """(lon, lat) of the box center."""
        return (self.west + self.east) / 2.0, (self.south + self.north) / 2.0

    def projector(self, anchor_longitude: bool = False) -> Projector:
        lon0, lat0 = self.center
        if anchor_longitude:
            return Projector(lat0, lon0)
        return Projector(lat0)
