class FlatprojError(Exception):
    """Base class for errors raised outside the numeric core."""


class RegionError(FlatprojError):
    """Region extents are inconsistent or empty."""


class ConfigError(FlatprojError):
    """A region config file is missing or malformed."""
