"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeIs

import msgspec

from twofold._internal.callables import resolve_with, settle
from twofold._internal.faults import DEFAULT_FAULTS, report_fault
from twofold.types.transmute import TransmuteTarget

if TYPE_CHECKING:
    from twofold.types.option import Option

__all__ = [
    'SUCCESS',
    'Err',
    'Ok',
    'Result',
    'catching',
    'catching_async',
    'from_awaitable',
]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok() without a value is a unit success, for operations that only signal
    completion.

    Examples:
        >>> ok = Ok(42)
        >>> ok.otherwise(0)
        42
        >>> ok.transform(lambda x: x * 2)
        Ok(value=84)
        >>> Ok()
        Ok(value=None)
    """

    value: T = None  # type: ignore[assignment]

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def otherwise(self, _fallback: T | Callable[..., T]) -> T:
        """Return the contained value without evaluating the fallback."""
        return self.value

    async def otherwise_async(self, _fallback: T | Callable[..., T | Awaitable[T]]) -> T:
        """Return the contained value without evaluating the fallback."""
        return self.value

    def get_or_else(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def transform[U, E](self, transformer: Callable[[T], Result[U, E] | U]) -> Result[U, E]:
        """Apply a function to the contained value, flattening Result results.

        Args:
            transformer: Function applied to the Ok value. A Result it returns
                is passed through unchanged; any other value is wrapped in Ok.

        Returns:
            The transformed Result.
        """
        return _lift_ok(transformer(self.value))

    async def transform_async[U, E](
        self, transformer: Callable[[T], Awaitable[Result[U, E] | U] | Result[U, E] | U]
    ) -> Result[U, E]:
        """Async version of transform(); awaits the transformer's result first."""
        return _lift_ok(await settle(transformer(self.value)))

    def reframe(self, _transformer: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since there is no error to reframe."""
        return self

    async def reframe_async(self, _transformer: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since there is no error to reframe."""
        return self

    def recover(self, _recovery: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged without calling the recovery."""
        return self

    async def recover_async(self, _recovery: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged without calling the recovery."""
        return self

    def when(
        self,
        success: Callable[[T], object] | None = None,
        failure: Callable[[Any], object] | None = None,  # noqa: ARG002
    ) -> Ok[T]:
        """Run the success handler with the value and return self for chaining."""
        if success is not None:
            success(self.value)
        return self

    async def when_async(
        self,
        success: Callable[[T], object] | None = None,
        failure: Callable[[Any], object] | None = None,  # noqa: ARG002
    ) -> Ok[T]:
        """Async version of when(); awaits the success handler if needed."""
        if success is not None:
            await settle(success(self.value))
        return self

    def merge(self) -> T:
        """Return the success value."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def chain[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.
        """
        return f(self.value)

    def map_error(self, _error: object) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def transmute(self, target: TransmuteTarget = TransmuteTarget.VALUE) -> Option[Any]:
        """Convert to Option.

        Args:
            target: VALUE keeps the success value (Some(value), or Nothing
                for a unit success); ERROR keeps the error, giving Nothing.

        Returns:
            The converted Option.
        """
        from twofold.types.option import Nothing, from_nullable

        if target is TransmuteTarget.ERROR:
            return Nothing
        return from_nullable(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. The error is usually a
    message string, an exception, or an error struct from twofold.errors.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.otherwise(lambda e: len(e))
        20
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def otherwise[T](self, fallback: T | Callable[[], T] | Callable[[E], T]) -> T:
        """Return the fallback, calling it first if it is a provider.

        Args:
            fallback: A plain value, a zero-argument provider, or a provider
                taking the error. A provider receives the error only if its
                signature shows a required positional parameter; builtins
                without an inspectable signature, such as str, are called
                with no arguments. Write lambda e: str(e) to pass the error
                to one. An async provider's coroutine is returned unawaited;
                use otherwise_async() to await it.

        Returns:
            The fallback value.
        """
        return resolve_with(fallback, self.error)

    async def otherwise_async[T](
        self, fallback: T | Callable[[], T | Awaitable[T]] | Callable[[E], T | Awaitable[T]]
    ) -> T:
        """Async version of otherwise(); awaits the provider's result if needed.

        Providers are dispatched as in otherwise().
        """
        return await settle(resolve_with(fallback, self.error))

    def get_or_else[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def transform(self, _transformer: Callable[[Any], Any]) -> Err[E]:
        """Forward the error without calling the transformer."""
        return self

    async def transform_async(self, _transformer: Callable[[Any], Any]) -> Err[E]:
        """Forward the error without calling the transformer."""
        return self

    def reframe[T, F](self, transformer: Callable[[E], Result[T, F] | F]) -> Result[T, F]:
        """Apply a function to the contained error.

        Args:
            transformer: Function applied to the error. A Result it returns is
                passed through unchanged (so an error can be turned into a
                success); any other value becomes the new error.

        Returns:
            The reframed Result.
        """
        return _lift_err(transformer(self.error))

    async def reframe_async[T, F](
        self, transformer: Callable[[E], Awaitable[Result[T, F] | F] | Result[T, F] | F]
    ) -> Result[T, F]:
        """Async version of reframe(); awaits the transformer's result first."""
        return _lift_err(await settle(transformer(self.error)))

    def recover[T, F](self, recovery: Callable[[E], Any]) -> Result[T, E] | Result[T, F]:
        """Try to turn the failure into a success.

        The recovery receives the error and may return:

        - a Result, returned as-is (its error type may differ);
        - Some(value), recovered to Ok(value), or Nothing, declined;
        - None, declined;
        - any other value, recovered to Ok(value).

        A declined recovery returns this Err itself, not a copy. To recover
        to None, return Ok(None).
        """
        return self._settle_recovery(recovery(self.error))

    async def recover_async[T, F](self, recovery: Callable[[E], Any]) -> Result[T, E] | Result[T, F]:
        """Async version of recover(); awaits the recovery's result first."""
        return self._settle_recovery(await settle(recovery(self.error)))

    def _settle_recovery(self, outcome: Any) -> Result[Any, Any]:
        from twofold.types.option import NothingType, Some

        if isinstance(outcome, Ok | Err):
            return outcome
        if outcome is None or isinstance(outcome, NothingType):
            return self
        if isinstance(outcome, Some):
            return Ok(outcome.value)
        return Ok(outcome)

    def when(
        self,
        success: Callable[[Any], object] | None = None,  # noqa: ARG002
        failure: Callable[[E], object] | None = None,
    ) -> Err[E]:
        """Run the failure handler with the error and return self for chaining."""
        if failure is not None:
            failure(self.error)
        return self

    async def when_async(
        self,
        success: Callable[[Any], object] | None = None,  # noqa: ARG002
        failure: Callable[[E], object] | None = None,
    ) -> Err[E]:
        """Async version of when(); awaits the failure handler if needed."""
        if failure is not None:
            await settle(failure(self.error))
        return self

    def merge(self) -> E:
        """Return the error value."""
        return self.error

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def chain(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_error[F](self, error: F) -> Err[F]:
        """Replace the error, ignoring the current one.

        Use reframe() to derive the new error from the old one.
        """
        return Err(error)

    def transmute(self, target: TransmuteTarget = TransmuteTarget.VALUE) -> Option[Any]:
        """Convert to Option.

        Args:
            target: VALUE keeps the success value, giving Nothing; ERROR keeps
                the error, giving Some(error).

        Returns:
            The converted Option.
        """
        from twofold.types.option import Nothing, from_nullable

        if target is TransmuteTarget.ERROR:
            return from_nullable(self.error)
        return Nothing


type Result[T, E = Exception] = Ok[T] | Err[E]

SUCCESS: Ok[None] = Ok()
"""Unit success for operations that only signal completion."""


def _lift_ok(result: Any) -> Result[Any, Any]:
    if isinstance(result, Ok | Err):
        return result
    return Ok(result)


def _lift_err(result: Any) -> Result[Any, Any]:
    if isinstance(result, Ok | Err):
        return result
    return Err(result)


def catching[**P, T](
    body: Callable[P, T],
    /,
    *args: P.args,
    exceptions: tuple[type[BaseException], ...] | None = None,
    **kwargs: P.kwargs,
) -> Result[T, BaseException]:
    """Call body and capture its return value or the exception it raises.

    This never raises a fault it catches: the fault becomes Err.

    The keyword-only exceptions argument is consumed by catching() itself. To
    pass a keyword argument named exceptions to body, bind it first with
    functools.partial.

    Args:
        body: The fallible operation.
        *args: Positional arguments for body.
        exceptions: Exception types to catch. Defaults to (Exception,), so
            KeyboardInterrupt and friends still propagate.
        **kwargs: Keyword arguments for body.

    Returns:
        Ok(return value) or Err(exception).

    Examples:
        >>> catching(int, '42')
        Ok(value=42)
        >>> catching(lambda: 1 / 0)
        Err(error=ZeroDivisionError('division by zero'))
    """
    catch = exceptions if exceptions is not None else DEFAULT_FAULTS
    try:
        return Ok(body(*args, **kwargs))
    except catch as e:
        report_fault('catching', e)
        return Err(e)


async def catching_async[**P, T](
    body: Callable[P, Awaitable[T]],
    /,
    *args: P.args,
    exceptions: tuple[type[BaseException], ...] | None = None,
    **kwargs: P.kwargs,
) -> Result[T, BaseException]:
    """Async version of catching(); the body's awaitable is awaited inside the boundary.

    exceptions is consumed here as in catching(); bind a body argument of the
    same name with functools.partial.

    Examples:
        >>> async def fetch() -> str:
        ...     raise ConnectionError('offline')
        >>> await catching_async(fetch)
        Err(error=ConnectionError('offline'))
    """
    catch = exceptions if exceptions is not None else DEFAULT_FAULTS
    try:
        return Ok(await settle(body(*args, **kwargs)))
    except catch as e:
        report_fault('catching_async', e)
        return Err(e)


async def from_awaitable[T](
    awaitable: Awaitable[T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T, BaseException]:
    """Await an asynchronous operation and capture its result or its fault.

    Args:
        awaitable: A coroutine, task or future.
        exceptions: Exception types to catch. Defaults to (Exception,).

    Returns:
        Ok(resolved value) or Err(exception).
    """
    catch = exceptions if exceptions is not None else DEFAULT_FAULTS
    try:
        return Ok(await awaitable)
    except catch as e:
        report_fault('from_awaitable', e)
        return Err(e)
