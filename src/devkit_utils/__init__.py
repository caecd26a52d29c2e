"""General-purpose utilities: disposal lifecycle, scoped semaphore
acquisition and argument validation."""

from .config import UtilitiesConfig, configure, configure_logging, get_config

__version__ = "0.1.0"

__all__ = [
    "UtilitiesConfig",
    "configure",
    "configure_logging",
    "get_config",
    "__version__",
]
