"""Reporting of faults captured at the fault containment points."""

from __future__ import annotations

from twofold._config import get_config
from twofold._logging import get_logger

__all__ = ['DEFAULT_FAULTS', 'report_fault']

DEFAULT_FAULTS: tuple[type[BaseException], ...] = (Exception,)

_logger = get_logger()


def report_fault(source: str, error: BaseException) -> None:
    """Log a captured fault at DEBUG when log_faults is enabled."""
    if get_config().log_faults:
        _logger.debug(
            'fault_captured',
            source=source,
            error_type=type(error).__name__,
            error=str(error),
        )
