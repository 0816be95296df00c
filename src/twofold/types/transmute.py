"""TransmuteTarget: which payload Result.transmute() keeps."""

from enum import Enum

__all__ = ['TransmuteTarget']


class TransmuteTarget(Enum):
    """Payload selector for converting a Result into an Option."""

    VALUE = 'value'
    ERROR = 'error'
