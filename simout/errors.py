# errors.py — Exceptions raised while loading and plotting simulation output.


class SimoutError(Exception):
    """Base class for all simout failures."""


class DiscoveryError(SimoutError, FileNotFoundError):
    """No file in the folder matches the requested pattern."""


class BoundsError(SimoutError, IndexError):
    """A run file has fewer iterations or outputs than requested."""


class ConfigError(SimoutError, ValueError):
    """A plotting parameter (type, outputs, layout, scale, ...) is invalid."""


class DataError(SimoutError, ValueError):
    """A run file holds non-numeric, missing or ragged values."""
