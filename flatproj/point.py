from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .projection import Projector


@dataclass(frozen=True)
class PlanarPoint:
    """
    A lon/lat projected by a Projector, in kilometers.

    Convention:
      - x increases east
      - y increases north
      - bearings are degrees clockwise from north (+y)
    """
    x: float
    y: float

    def _delta(self, other: PlanarPoint) -> tuple[float, float]:
        return other.x - self.x, other.y - self.y

    def distance(self, other: PlanarPoint) -> float:
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: PlanarPoint) -> float:
        """Squared distance in km^2; cheaper for comparisons."""
        dx, dy = self._delta(other)
        return dx * dx + dy * dy

    def bearing(self, other: PlanarPoint) -> float:
        """
        Compass bearing in degrees [0, 360) from this point to other.
        Identical points give 0.
        """
        dx, dy = self._delta(other)
        return _bearing(dx, dy)

    def distance_bearing(self, other: PlanarPoint) -> tuple[float, float]:
        dx, dy = self._delta(other)
        return math.sqrt(dx * dx + dy * dy), _bearing(dx, dy)

    def offset(self, dx_km: float, dy_km: float) -> PlanarPoint:
        return PlanarPoint(self.x + dx_km, self.y + dy_km)

    def destination(self, distance_km: float, bearing_deg: float) -> PlanarPoint:
        """Point reached by travelling distance_km along bearing_deg."""
        a = math.radians(bearing_deg)
        return self.offset(math.sin(a) * distance_km, math.cos(a) * distance_km)

    def to_lonlat(self, projector: Projector) -> tuple[float, float]:
        return projector.unproject(self)


def _bearing(dx: float, dy: float) -> float:
    deg = math.degrees(math.atan2(dx, dy))
    if deg < 0.0:
        deg += 360.0
    # -1e-15 + 360 rounds to 360.0
    if deg >= 360.0:
        deg = 0.0
    return deg


def pairwise_distances(xs, ys) -> np.ndarray:
    """
    (n, n) matrix of planar distances (km) between projected points,
    e.g. the output of Projector.project_array().
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    dx = xs[:, None] - xs[None, :]
    dy = ys[:, None] - ys[None, :]
    return np.hypot(dx, dy)
