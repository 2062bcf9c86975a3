"""Structured logging for tagged-result.

The library itself only emits debug events (an exception captured by wrap(),
an inner stream abandoned by a switch operator). Loggers are structlog
wrappers around stdlib loggers, so those events go nowhere until an
application calls configure_logging(), or init() with a log level.

configure_logging() routes structlog and plain stdlib records through one
``ProcessorFormatter`` handler on the root logger, rendered as JSON or as
console output. Hooks registered with add_log_hook() see every structlog
event, which is how tests and metrics collectors observe the library.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import IO, Any

import structlog

__all__ = [
    'LogHook',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_hooks: list[LogHook] = []

# Marks the handler installed by configure_logging() so a second call replaces it.
_HANDLER_MARK = '_tagged_result_handler'


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor handing each hook its own copy of the event."""
    for hook in tuple(_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: BLE001, S112
            continue
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors applied to both structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def _renderer(json_output: bool, stream: IO[str]) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> None:
    """Configure structlog and the root logger for unified output.

    Calling it again replaces the handler it installed earlier; handlers
    installed by the application are left alone.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...). Unknown names mean INFO.
        json_output: JSON lines if True, console rendering otherwise.
        stream: Where records are written. Defaults to stderr.
    """
    out = stream if stream is not None else sys.stderr

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output, out),
            ],
        )
    )
    setattr(handler, _HANDLER_MARK, True)

    root = logging.getLogger()
    for existing in [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger over the stdlib logger ``name``.

    Defaults to the ``tagged_result`` logger. Levels and handlers come from
    stdlib logging.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or 'tagged_result'),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def add_log_hook(hook: LogHook) -> None:
    """Call hook with a copy of every structlog event from now on."""
    _hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister hook; unknown hooks are ignored."""
    if hook in _hooks:
        _hooks.remove(hook)


def clear_log_hooks() -> None:
    _hooks.clear()
