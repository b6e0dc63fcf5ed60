"""
Region config files.

Either bounding extents:
    {"south": 50.8, "west": 6.1, "north": 51.3, "east": 7.0}
or an explicit reference:
    {"reference_latitude": 51.05, "reference_longitude": 6.0}
"""
import json
import logging
import os

from .errors import ConfigError, RegionError
from .projection import Projector
from .region import Region

logger = logging.getLogger(__name__)

_EXTENT_KEYS = ("south", "west", "north", "east")


def load_region_config(path: str) -> dict:
    if not os.path.isfile(path):
        raise ConfigError(f"region config not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = json.load(f)
    except (ValueError, OSError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        raise ConfigError(f"cannot read region config {path}: {e}") from e
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path}: expected a JSON object")
    return cfg


def projector_from_config(cfg: dict) -> Projector:
    if "reference_latitude" in cfg:
        try:
            lat0 = float(cfg["reference_latitude"])
            lon0 = float(cfg.get("reference_longitude", 0.0))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"bad reference coordinates: {e}") from e
        return Projector(lat0, lon0)

    missing = [k for k in _EXTENT_KEYS if k not in cfg]
    if missing:
        raise ConfigError(f"region config missing keys: {', '.join(missing)}")
    try:
        region = Region(**{k: float(cfg[k]) for k in _EXTENT_KEYS})
    except (TypeError, ValueError) as e:
        raise ConfigError(f"bad region extents: {e}") from e
    except RegionError as e:
        raise ConfigError(str(e)) from e

    anchor = bool(cfg.get("anchor_longitude", False))
    logger.debug("Region %s center=%s anchor_longitude=%s", region, region.center, anchor)
    return region.projector(anchor_longitude=anchor)
