"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from twofold._internal.callables import resolve, settle
from twofold.errors import DEFAULT_MISSING_MESSAGE, MissingValueError

if TYPE_CHECKING:
    from twofold.types.result import Err, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'from_nullable']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. The value is never None: use
    from_nullable() for values that may be absent.

    Examples:
        >>> some = Some(42)
        >>> some.otherwise(0)
        42
        >>> some.transform(lambda x: x * 2)
        Some(value=84)
        >>> some.transform(lambda x: Nothing)
        NothingType()
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            msg = 'Some() requires a value; use from_nullable() for values that may be None'
            raise TypeError(msg)

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def otherwise(self, _fallback: T | Callable[[], T]) -> T:
        """Return the contained value without evaluating the fallback."""
        return self.value

    async def otherwise_async(self, _fallback: T | Callable[[], T | Awaitable[T]]) -> T:
        """Return the contained value without evaluating the fallback."""
        return self.value

    def get_or_else(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def get_or_raise(self, _message: str = DEFAULT_MISSING_MESSAGE) -> T:
        """Return the contained value.

        Unstable: kept as a narrow escape hatch, prefer otherwise().
        """
        return self.value

    def optionally(self, _alternative: Option[T] | Callable[[], Option[T] | T | None]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    async def optionally_async(self, _alternative: Any) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def transform[U](self, transformer: Callable[[T], Option[U] | U | None]) -> Option[U]:
        """Apply a function to the contained value, flattening Option results.

        Args:
            transformer: Function applied to the Some value. It may return a
                plain value (wrapped in Some), None (becomes Nothing) or an
                Option (returned as-is).

        Returns:
            The transformed Option.
        """
        return _lift(transformer(self.value))

    async def transform_async[U](
        self, transformer: Callable[[T], Awaitable[Option[U] | U | None] | Option[U] | U | None]
    ) -> Option[U]:
        """Async version of transform(); awaits the transformer's result first."""
        return _lift(await settle(transformer(self.value)))

    def map[U](self, f: Callable[[T], U | None]) -> Option[U]:
        """Apply a function to the contained value and wrap the result.

        A None result becomes Nothing.
        """
        return from_nullable(f(self.value))

    def chain[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return Some if the predicate is satisfied, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def when(
        self,
        some: Callable[[T], object] | None = None,
        none: Callable[[], object] | None = None,  # noqa: ARG002
    ) -> None:
        """Run the some handler with the contained value."""
        if some is not None:
            some(self.value)

    async def when_async(
        self,
        some: Callable[[T], object] | None = None,
        none: Callable[[], object] | None = None,  # noqa: ARG002
    ) -> None:
        """Run the some handler with the contained value, awaiting it if needed."""
        if some is not None:
            await settle(some(self.value))

    def transmute[E](self, _error: E) -> Ok[T]:
        """Convert to Result, returning Ok(value).

        Args:
            _error: Ignored error value.

        Returns:
            Ok containing the value.
        """
        from twofold.types.result import Ok

        return Ok(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.otherwise(0)
        0
        >>> Nothing.otherwise(lambda: 1)
        1
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def otherwise[T](self, fallback: T | Callable[[], T]) -> T:
        """Return the fallback, calling it first if it is a provider.

        Args:
            fallback: A plain value, or a zero-argument callable producing one.
                An async provider's coroutine is returned unawaited; use
                otherwise_async() to await it.

        Returns:
            The fallback value.
        """
        return resolve(fallback)

    async def otherwise_async[T](self, fallback: T | Callable[[], T | Awaitable[T]]) -> T:
        """Async version of otherwise(); awaits the provider's result if needed."""
        return await settle(resolve(fallback))

    def get_or_else[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def get_or_raise(self, message: str = DEFAULT_MISSING_MESSAGE) -> NoReturn:
        """Raise since there is no value to return.

        Unstable: kept as a narrow escape hatch, prefer otherwise().

        Raises:
            MissingValueError: Always, with the given message.
        """
        raise MissingValueError(message)

    def optionally[T](self, alternative: Option[T] | Callable[[], Option[T] | T | None]) -> Option[T]:
        """Return the alternative option, calling it first if it is a provider.

        A plain value or None produced by the alternative is passed through
        from_nullable().
        """
        return _lift(resolve(alternative))

    async def optionally_async[T](
        self, alternative: Option[T] | Callable[[], Awaitable[Option[T] | T | None] | Option[T] | T | None]
    ) -> Option[T]:
        """Async version of optionally(); awaits the provider's result if needed."""
        return _lift(await settle(resolve(alternative)))

    def transform(self, _transformer: Callable[[Any], Any]) -> NothingType:
        """Return Nothing without calling the transformer."""
        return self

    async def transform_async(self, _transformer: Callable[[Any], Any]) -> NothingType:
        """Return Nothing without calling the transformer."""
        return self

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def chain(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def when(
        self,
        some: Callable[[Any], object] | None = None,  # noqa: ARG002
        none: Callable[[], object] | None = None,
    ) -> None:
        """Run the none handler."""
        if none is not None:
            none()

    async def when_async(
        self,
        some: Callable[[Any], object] | None = None,  # noqa: ARG002
        none: Callable[[], object] | None = None,
    ) -> None:
        """Run the none handler, awaiting it if needed."""
        if none is not None:
            await settle(none())

    def transmute[E](self, error: E) -> Err[E]:
        """Convert to Result, returning Err(error).

        The error is used as-is, even when it is callable.
        """
        from twofold.types.result import Err

        return Err(error)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def from_nullable[T](value: T | None) -> Option[T]:
    """Convert a possibly-None value into an Option.

    Examples:
        >>> from_nullable({'key': 'value'}.get('key'))
        Some(value='value')
        >>> from_nullable(None)
        NothingType()
    """
    if value is None:
        return Nothing
    return Some(value)


def _lift(result: Any) -> Option[Any]:
    """Return Option results as-is and pass anything else through from_nullable()."""
    if isinstance(result, Some | NothingType):
        return result
    return from_nullable(result)
