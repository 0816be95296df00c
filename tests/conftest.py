"""Pytest configuration and shared fixtures for twofold tests."""

from __future__ import annotations

import logging
from typing import Any

import pytest


class Provider:
    """Callable that records its invocations and returns a fixed value."""

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.value

    @property
    def call_count(self) -> int:
        return len(self.calls)


class AsyncProvider(Provider):
    """Async variant of Provider."""

    async def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.value


class CountingProvider:
    """Zero-argument callable that counts its invocations."""

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.call_count = 0

    def __call__(self) -> Any:
        self.call_count += 1
        return self.value


class AsyncCountingProvider(CountingProvider):
    """Async variant of CountingProvider."""

    async def __call__(self) -> Any:
        self.call_count += 1
        return self.value


@pytest.fixture
def provider() -> type[Provider]:
    """Factory for recording sync providers."""
    return Provider


@pytest.fixture
def async_provider() -> type[AsyncProvider]:
    """Factory for recording async providers."""
    return AsyncProvider


@pytest.fixture
def counting_provider() -> type[CountingProvider]:
    """Factory for zero-argument sync providers."""
    return CountingProvider


@pytest.fixture
def async_counting_provider() -> type[AsyncCountingProvider]:
    """Factory for zero-argument async providers."""
    return AsyncCountingProvider


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from twofold import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from twofold import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from twofold import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from twofold import Nothing

    return Nothing


@pytest.fixture(autouse=True)
def reset_config():
    """Forget configuration, hooks and twofold logger setup between tests."""
    from twofold._config import reset
    from twofold._logging import clear_log_hooks

    reset()
    clear_log_hooks()
    yield
    reset()
    clear_log_hooks()

    library_logger = logging.getLogger('twofold')
    for handler in list(library_logger.handlers):
        library_logger.removeHandler(handler)
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True
