"""
Fast approximate distance and bearing via a local flat projection of WGS84.
"""
from .ellipsoid import Ellipsoid, WGS84, GRS80
from .point import PlanarPoint, pairwise_distances
from .projection import Projector
from .region import Region
from .errors import FlatprojError, RegionError, ConfigError

__all__ = [
    "Ellipsoid",
    "WGS84",
    "GRS80",
    "PlanarPoint",
    "pairwise_distances",
    "Projector",
    "Region",
    "FlatprojError",
    "RegionError",
    "ConfigError",
]
