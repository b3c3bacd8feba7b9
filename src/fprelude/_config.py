"""Library configuration: PreludeConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fprelude._logging import configure_logging

__all__ = ['PreludeConfig', 'get_config', 'init']

LOG_LEVEL_ENV = 'FPRELUDE_LOG_LEVEL'
LOG_FORMAT_ENV = 'FPRELUDE_LOG_FORMAT'


@dataclass(frozen=True)
class PreludeConfig:
    """Configuration for fprelude.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render logs as JSON when True, as console lines otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: PreludeConfig | None = None


def _detect_log_level() -> str | None:
    return os.environ.get(LOG_LEVEL_ENV) or None


def _detect_json_logs() -> bool:
    """Detect the log format from FPRELUDE_LOG_FORMAT ("json" or "console")."""
    env_format = os.environ.get(LOG_FORMAT_ENV, '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, env_format)
    return True


def init(log_level: str | None = None, json_logs: bool | None = None) -> PreludeConfig:
    """Initialize fprelude with the given configuration.

    Unset arguments fall back to the FPRELUDE_LOG_LEVEL and
    FPRELUDE_LOG_FORMAT environment variables.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: JSON output when True, console output when False.

    Returns:
        The PreludeConfig that was set.

    Example:
        ```python
        import fprelude

        fprelude.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = PreludeConfig(log_level=resolved_level, json_logs=resolved_json)

    # Configure logging if level specified
    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> PreludeConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'fprelude not initialized. Call fprelude.init() first.'
        raise RuntimeError(msg)
    return _config
