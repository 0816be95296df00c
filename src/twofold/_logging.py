"""Structured logging for twofold.

twofold logs through structlog on top of stdlib logging, under the ``twofold``
logger hierarchy. Nothing is printed unless the application configures
logging, or calls configure_logging() / init(log_level=...), which attach a
single handler to the ``twofold`` logger and leave the root logger alone.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'LIBRARY_LOGGER',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

LIBRARY_LOGGER = 'twofold'

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []
_handler: logging.Handler | None = None


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001, S112
            continue
    return event_dict


def _base_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _event_processors() -> list[Any]:
    """Processor chain for loggers returned by get_logger()."""
    return [
        *_base_processors(),
        _run_hooks,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Send twofold's log events to stderr.

    Only the ``twofold`` logger is touched: its previous twofold handler is
    replaced, its level is set, and it stops propagating so events are not
    printed twice. Handlers and levels set up by the application elsewhere,
    the root logger's included, are kept.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    global _handler  # noqa: PLW0603

    logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[*_base_processors(), structlog.stdlib.ExtraAdder()],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
        )
    )

    logger.addHandler(_handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger writing to the stdlib logger ``name``.

    The logger carries its own processor chain, so it works the same whether
    or not the application has called structlog.configure().

    Args:
        name: Logger name. Defaults to ``twofold``.

    Returns:
        A lazily bound structlog stdlib BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or LIBRARY_LOGGER),
        processors=_event_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of every twofold log event.

    Hooks run whether or not the event's level is enabled, which makes them
    suitable for counting captured faults in tests or metrics. A hook that
    raises is skipped.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
