"""Core types: Option, Some, Nothing, Result, Ok, Err and the conversion bridge."""

from twofold.types.instance import has_instance, is_option, is_result
from twofold.types.option import Nothing, NothingType, Option, Some, from_nullable
from twofold.types.result import (
    SUCCESS,
    Err,
    Ok,
    Result,
    catching,
    catching_async,
    from_awaitable,
)
from twofold.types.transmute import TransmuteTarget

__all__ = [
    'SUCCESS',
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'TransmuteTarget',
    'catching',
    'catching_async',
    'from_awaitable',
    'from_nullable',
    'has_instance',
    'is_option',
    'is_result',
]
