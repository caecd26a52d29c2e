"""Library-wide configuration.

Settings are read once from the environment and can be replaced at startup:
1. DEVKIT_UTILS_LOG_LEVEL - level used by configure_logging()
2. DEVKIT_UTILS_WARN_UNDISPOSED - warn when a disposable is reclaimed undisposed
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "DEVKIT_UTILS_LOG_LEVEL"
WARN_UNDISPOSED_ENV_VAR = "DEVKIT_UTILS_WARN_UNDISPOSED"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass
class UtilitiesConfig:
    """Runtime settings for devkit_utils."""

    log_level: str = field(
        default_factory=lambda: os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    )
    """Level name applied by configure_logging()."""

    warn_on_undisposed: bool = field(
        default_factory=lambda: _env_flag(WARN_UNDISPOSED_ENV_VAR, True)
    )
    """Log a warning when a disposable reaches finalization without dispose()."""


# Global configuration (replaced by configure())
_config: UtilitiesConfig = UtilitiesConfig()


def configure(
    *,
    log_level: str | None = None,
    warn_on_undisposed: bool | None = None,
) -> UtilitiesConfig:
    """Replace the global configuration.

    Unspecified settings fall back to their environment-derived defaults.

    Args:
        log_level: Logging level name (e.g. "DEBUG")
        warn_on_undisposed: Whether to warn about entities reclaimed undisposed

    Returns:
        The new configuration
    """
    global _config
    config = UtilitiesConfig()
    if log_level is not None:
        config.log_level = log_level.upper()
    if warn_on_undisposed is not None:
        config.warn_on_undisposed = warn_on_undisposed
    _config = config
    logger.debug(
        f"Configured: log_level={config.log_level}, "
        f"warn_on_undisposed={config.warn_on_undisposed}"
    )
    return config


def get_config() -> UtilitiesConfig:
    """Get current configuration."""
    return _config


def configure_logging() -> None:
    """Configure logging based on the current configuration."""
    logging.basicConfig(
        level=getattr(logging, _config.log_level, logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
