"""Runtime type tests for Option and Result values.

These check the container shape only; type parameters are not checked at
runtime, so has_instance(Some('a'), Option[int]) is True.
"""

from __future__ import annotations

import types
from typing import Any, TypeAliasType, TypeIs, Union, get_args, get_origin

from twofold.types.option import NothingType, Option, Some
from twofold.types.result import Err, Ok, Result

__all__ = ['has_instance', 'is_option', 'is_result']


def _classes(kind: Any) -> tuple[type, ...]:
    """Flatten a class, alias, union or parametrised generic into plain classes."""
    if isinstance(kind, TypeAliasType):
        return _classes(kind.__value__)

    origin = get_origin(kind)
    if origin is Union or origin is types.UnionType:
        return tuple(cls for arg in get_args(kind) for cls in _classes(arg))
    if origin is not None:
        return _classes(origin)

    if isinstance(kind, type):
        return (kind,)
    msg = f'has_instance() expects a class, union or type alias, got {kind!r}'
    raise TypeError(msg)


def has_instance(value: object, kind: Any) -> bool:
    """Return True if value is an instance of kind.

    Args:
        value: Any value.
        kind: A class (Some, Ok, ...), a parametrised class (Some[int]), a
            union (Ok | Err) or a type alias (Option, Result[int, str]).

    Raises:
        TypeError: If kind is not something a type test can be built from.

    Examples:
        >>> has_instance(Some(1), Option)
        True
        >>> has_instance(1, Option)
        False
        >>> has_instance(Err('e'), Result[int, str])
        True
    """
    return isinstance(value, _classes(kind))


def is_option(value: object) -> TypeIs[Option[Any]]:
    """Return True if value is Some or Nothing."""
    return isinstance(value, Some | NothingType)


def is_result(value: object) -> TypeIs[Result[Any, Any]]:
    """Return True if value is Ok or Err."""
    return isinstance(value, Ok | Err)
