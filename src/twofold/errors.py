"""Error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'DEFAULT_MISSING_MESSAGE',
    'MissingValue',
    'MissingValueError',
]

DEFAULT_MISSING_MESSAGE = 'tried to get a value from Nothing'


class MissingValue(msgspec.Struct, frozen=True, gc=False):
    """A value was required but absent - struct variant for Result[T, MissingValue].

    Handy as the filler error when converting an Option to a Result:

        >>> Nothing.transmute(MissingValue('no user'))
        Err(error=MissingValue(message='no user'))
    """

    message: str = DEFAULT_MISSING_MESSAGE

    def to_exception(self) -> MissingValueError:
        """Convert to exception for raise-based code."""
        return MissingValueError(self.message)


class MissingValueError(RuntimeError):
    """A value was required but absent - exception variant."""

    def __init__(self, message: str = DEFAULT_MISSING_MESSAGE) -> None:
        self.message = message
        super().__init__(message)

    def to_struct(self) -> MissingValue:
        """Convert to struct for Result-based code."""
        return MissingValue(self.message)
