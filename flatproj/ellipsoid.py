import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Ellipsoid:
    """
    Reference ellipsoid given by semi-major axis (meters) and flattening.
    """
    name: str
    semi_major_axis_m: float
    flattening: float

    @property
    def eccentricity_squared(self) -> float:
        return self.flattening * (2.0 - self.flattening)

    def meridian_radius_m(self, lat_deg: float) -> float:
        """
        Radius of curvature in the meridian at lat_deg:
          M = a(1 - e^2) / (1 - e^2 sin^2 lat)^(3/2)
        """
        e2 = self.eccentricity_squared
        s = math.sin(math.radians(lat_deg))
        w = 1.0 - e2 * s * s
        return self.semi_major_axis_m * (1.0 - e2) / (w * math.sqrt(w))

    def transverse_radius_m(self, lat_deg: float) -> float:
        """
        Radius of curvature in the prime vertical at lat_deg:
          N = a / sqrt(1 - e^2 sin^2 lat)
        """
        e2 = self.eccentricity_squared
        s = math.sin(math.radians(lat_deg))
        return self.semi_major_axis_m / math.sqrt(1.0 - e2 * s * s)


WGS84 = Ellipsoid(name="WGS84", semi_major_axis_m=6378137.0, flattening=1.0 / 298.257223563)
GRS80 = Ellipsoid(name="GRS80", semi_major_axis_m=6378137.0, flattening=1.0 / 298.257222101)
