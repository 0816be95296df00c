"""Library configuration: TwofoldConfig, init() and get_config()."""

from __future__ import annotations

import os
from dataclasses import dataclass

from twofold._logging import configure_logging, get_logger

__all__ = [
    'TwofoldConfig',
    'get_config',
    'init',
    'reset',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class TwofoldConfig:
    """Configuration for twofold.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs when logging is configured, else console output.
        log_faults: Log every fault captured by catching()/from_awaitable()/@safe.
    """

    log_level: str | None = None
    json_logs: bool = True
    log_faults: bool = False


_config: TwofoldConfig | None = None
_env_config: TwofoldConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    get_logger(__name__).warning('unknown_env_flag', name=name, value=raw, default=default)
    return default


def _config_from_env() -> TwofoldConfig:
    """Build a configuration from TWOFOLD_* environment variables."""
    return TwofoldConfig(
        log_level=os.environ.get('TWOFOLD_LOG_LEVEL') or None,
        json_logs=_env_flag('TWOFOLD_JSON_LOGS', True),
        log_faults=_env_flag('TWOFOLD_LOG_FAULTS', False),
    )


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    log_faults: bool | None = None,
) -> TwofoldConfig:
    """Initialize twofold with the given configuration.

    Unset arguments fall back to the TWOFOLD_LOG_LEVEL, TWOFOLD_JSON_LOGS and
    TWOFOLD_LOG_FAULTS environment variables.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON logs instead of console output.
        log_faults: Log faults captured by the fault containment helpers.

    Returns:
        The TwofoldConfig that was set.

    Example:
        ```python
        import twofold

        twofold.init(log_level='DEBUG', log_faults=True)
        twofold.catching(lambda: 1 / 0)  # logs fault_captured
        ```
    """
    global _config  # noqa: PLW0603

    env = _config_from_env()
    _config = TwofoldConfig(
        log_level=log_level if log_level is not None else env.log_level,
        json_logs=json_logs if json_logs is not None else env.json_logs,
        log_faults=log_faults if log_faults is not None else env.log_faults,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> TwofoldConfig:
    """Get the current configuration.

    If init() has not been called, the configuration is read from the
    environment on first use and reused until init() or reset().
    """
    global _env_config  # noqa: PLW0603

    if _config is not None:
        return _config
    if _env_config is None:
        _env_config = _config_from_env()
    return _env_config


def reset() -> None:
    """Forget the configuration set by init() or read from the environment."""
    global _config, _env_config  # noqa: PLW0603
    _config = None
    _env_config = None
