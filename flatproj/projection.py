"""
Local flat projection: WGS84 lon/lat (degrees) -> planar x/y (kilometers).

x increases east, y increases north. Accuracy is best near the reference
latitude and degrades beyond roughly 500 km from it. Near the poles kx
collapses towards 0 and the results stop meaning anything; nothing is
rejected, it just becomes inaccurate.
"""
import logging
import math
from dataclasses import dataclass, field

import numpy as np

from .ellipsoid import WGS84, Ellipsoid
from .point import PlanarPoint

logger = logging.getLogger(__name__)

# |lat| beyond this is outside the useful range of the flat approximation
POLAR_WARNING_LAT = 85.0


@dataclass(frozen=True)
class Projector:
    """
    Precomputes km-per-degree scale factors at a reference latitude.

    Points are only comparable when they come from the same Projector (same
    reference latitude and longitude). The default reference longitude of 0
    projects longitude directly; pass the region's longitude to keep x small
    far from the prime meridian.
    """
    reference_latitude: float
    reference_longitude: float = 0.0
    ellipsoid: Ellipsoid = WGS84
    kx: float = field(init=False)  # km per degree of longitude
    ky: float = field(init=False)  # km per degree of latitude

    def __post_init__(self):
        lat0 = self.reference_latitude
        km_per_rad = math.pi / 180.0 / 1000.0
        m = self.ellipsoid.meridian_radius_m(lat0)
        n = self.ellipsoid.transverse_radius_m(lat0)

        # frozen dataclass: bypass __setattr__ for the derived fields
        object.__setattr__(self, "ky", km_per_rad * m)
        object.__setattr__(self, "kx", km_per_rad * n * math.cos(math.radians(lat0)))

        if abs(lat0) >= POLAR_WARNING_LAT:
            logger.warning(
                "Reference latitude %.4f is near a pole; flat projection is inaccurate here", lat0
            )
        logger.debug("Projector lat0=%s lon0=%s kx=%.6f ky=%.6f",
                     lat0, self.reference_longitude, self.kx, self.ky)

    def project(self, lon: float, lat: float) -> PlanarPoint:
        x = (lon - self.reference_longitude) * self.kx
        y = (lat - self.reference_latitude) * self.ky
        return PlanarPoint(x, y)

    def unproject(self, point: PlanarPoint) -> tuple[float, float]:
        """Return (lon, lat) in degrees for a point produced by this projector."""
        lon = self.reference_longitude + point.x / self.kx
        lat = self.reference_latitude + point.y / self.ky
        return lon, lat

    def project_array(self, lons, lats) -> tuple[np.ndarray, np.ndarray]:
        """
        Vectorized project() for many points at once.
        Returns (xs, ys) as float arrays in km.
        """
        lons = np.asarray(lons, dtype=float)
        lats = np.asarray(lats, dtype=float)
        xs = (lons - self.reference_longitude) * self.kx
        ys = (lats - self.reference_latitude) * self.ky
        return xs, ys

    def unproject_array(self, xs, ys) -> tuple[np.ndarray, np.ndarray]:
        xs = np.asarray(xs, dtype=float)
        ys = np.asarray(ys, dtype=float)
        lons = self.reference_longitude + xs / self.kx
        lats = self.reference_latitude + ys / self.ky
        return lons, lats
