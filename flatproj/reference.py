"""
Reference distances used to measure the flat approximation error.
All points are (lon, lat) in degrees; results in km / degrees.
"""
import math
from functools import lru_cache

from pyproj import Geod

from .ellipsoid import WGS84, Ellipsoid

MEAN_EARTH_RADIUS_KM = 6371.0088


@lru_cache(maxsize=None)
def _geod(ellipsoid: Ellipsoid) -> Geod:
    return Geod(a=ellipsoid.semi_major_axis_m, f=ellipsoid.flattening)


def geodesic_distance_km(a: tuple[float, float], b: tuple[float, float],
                         ellipsoid: Ellipsoid = WGS84) -> float:
    """
    Geodesic distance on the ellipsoid (Karney's algorithm via pyproj).
    """
    lon1, lat1 = a
    lon2, lat2 = b
    _, _, dist_m = _geod(ellipsoid).inv(lon1, lat1, lon2, lat2)  # (az12, az21, dist_m)
    return dist_m / 1000.0


def geodesic_bearing(a: tuple[float, float], b: tuple[float, float],
                     ellipsoid: Ellipsoid = WGS84) -> float:
    """Initial azimuth from a to b, degrees in [0, 360)."""
    lon1, lat1 = a
    lon2, lat2 = b
    az12, _, _ = _geod(ellipsoid).inv(lon1, lat1, lon2, lat2)
    return az12 % 360.0


def haversine_distance_km(a: tuple[float, float], b: tuple[float, float]) -> float:
    lon1, lat1 = a
    lon2, lat2 = b
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    h = (math.sin(dlat / 2.0) ** 2
         + math.sin(dlon / 2.0) ** 2 * math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)))
    return 2.0 * math.atan2(math.sqrt(h), math.sqrt(1.0 - h)) * MEAN_EARTH_RADIUS_KM
