from .errors import SimoutError, DiscoveryError, BoundsError, ConfigError, DataError
from .loading import discover_files, read_matrix, load_runs
from .stats import extremes, mavg, replication_mavg
from .output_plot import (
    output_plot, resolve_config, PlotConfig, PlotResult,
    Superimposed, Filled, MovingAverage, DEFAULT_COLORS,
)

__all__ = [
    "output_plot", "resolve_config", "PlotConfig", "PlotResult",
    "Superimposed", "Filled", "MovingAverage", "DEFAULT_COLORS",
    "discover_files", "read_matrix", "load_runs",
    "extremes", "mavg", "replication_mavg",
    "SimoutError", "DiscoveryError", "BoundsError", "ConfigError", "DataError",
]
