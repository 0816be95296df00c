"""Resolution of value-or-provider arguments shared by the combinators.

A fallback may be a plain value, a provider taking no arguments, or (for
Result) a provider taking the captured error. Providers are only called when
their value is actually needed.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

__all__ = ['accepts_argument', 'resolve', 'resolve_with', 'settle']


def accepts_argument(provider: Callable[..., Any]) -> bool:
    """Return True if the provider can be called with one positional argument.

    Callables whose signature cannot be inspected, such as some builtin types,
    are treated as taking no arguments, so Err('boom').otherwise(str) gives ''.
    """
    try:
        signature = inspect.signature(provider)
    except (TypeError, ValueError):
        return False

    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if (
            parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
            and parameter.default is inspect.Parameter.empty
        ):
            return True
    return False


def resolve(fallback: Any) -> Any:
    """Return a plain fallback as-is, or the result of calling a provider."""
    if callable(fallback):
        return fallback()
    return fallback


def resolve_with(fallback: Any, argument: Any) -> Any:
    """Like resolve(), passing argument to providers that accept one."""
    if callable(fallback):
        if accepts_argument(fallback):
            return fallback(argument)
        return fallback()
    return fallback


async def settle[T](value: T | Awaitable[T]) -> T:
    """Await value if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value
