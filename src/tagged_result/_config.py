"""Library configuration: ResultConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from tagged_result._logging import configure_logging

__all__ = [
    'ResultConfig',
    'get_config',
    'init',
]

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class ResultConfig:
    """Configuration for tagged-result.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs when logging is configured, else console output.
        capture_exceptions: Exception types that wrap(), wrap_async(), @safe
            and @safe_async turn into Err when no explicit tuple is given.
    """

    log_level: str | None = None
    json_logs: bool = True
    capture_exceptions: tuple[type[BaseException], ...] = (Exception,)


_DEFAULT = ResultConfig()

# Set by init(); get_config() falls back to the defaults until then.
_config: ResultConfig | None = None


def _detect_log_level() -> str | None:
    """Read TAGGED_RESULT_LOG_LEVEL, returning None when unset or empty."""
    level = os.environ.get('TAGGED_RESULT_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Read TAGGED_RESULT_JSON_LOGS, defaulting to True."""
    value = os.environ.get('TAGGED_RESULT_JSON_LOGS', '').strip().lower()
    if not value or value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logging.warning("Unknown TAGGED_RESULT_JSON_LOGS value '%s', defaulting to JSON", value)
    return True


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    capture_exceptions: tuple[type[BaseException], ...] | None = None,
) -> ResultConfig:
    """Initialize tagged-result with the given configuration.

    Unset arguments are read from the environment (TAGGED_RESULT_LOG_LEVEL,
    TAGGED_RESULT_JSON_LOGS) or take their defaults. Calling init() is
    optional; without it get_config() returns the defaults.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: JSON (True) or console (False) log output.
        capture_exceptions: Default exception types captured as Err.

    Returns:
        The ResultConfig that was set.

    Example:
        ```python
        from tagged_result import init

        init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()
    resolved_capture = capture_exceptions if capture_exceptions is not None else _DEFAULT.capture_exceptions
    if not resolved_capture:
        msg = 'capture_exceptions must name at least one exception type'
        raise ValueError(msg)

    _config = ResultConfig(
        log_level=resolved_level,
        json_logs=resolved_json,
        capture_exceptions=resolved_capture,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> ResultConfig:
    """Get the current configuration, or the defaults if init() was never called."""
    if _config is None:
        return _DEFAULT
    return _config
