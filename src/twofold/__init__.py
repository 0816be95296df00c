"""twofold: Option and Result containers with a shared combinator vocabulary.

Flat imports (preferred):
    from twofold import Option, Some, Nothing, from_nullable
    from twofold import Result, Ok, Err, catching, from_awaitable
    from twofold import TransmuteTarget, has_instance, safe

Submodule imports (for organization):
    from twofold.types import Option, Result
    from twofold.decorators import safe, safe_async
    from twofold.errors import MissingValue, MissingValueError
"""

# Configuration and logging
from twofold._config import TwofoldConfig, get_config, init
from twofold._logging import configure_logging, get_logger

# Decorators
from twofold.decorators import safe, safe_async

# Errors
from twofold.errors import MissingValue, MissingValueError

# Types
from twofold.types import (
    SUCCESS,
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    TransmuteTarget,
    catching,
    catching_async,
    from_awaitable,
    from_nullable,
    has_instance,
    is_option,
    is_result,
)

__all__ = [
    'SUCCESS',
    # Result types
    'Err',
    # Errors
    'MissingValue',
    'MissingValueError',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    # Conversion
    'TransmuteTarget',
    # Configuration
    'TwofoldConfig',
    'catching',
    'catching_async',
    'configure_logging',
    'from_awaitable',
    'from_nullable',
    'get_config',
    'get_logger',
    # Type tests
    'has_instance',
    'init',
    'is_option',
    'is_result',
    # Decorators
    'safe',
    'safe_async',
]
