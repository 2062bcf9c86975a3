"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

import warnings
from collections.abc import Awaitable, Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

from tagged_result._config import get_config
from tagged_result._display import to_display
from tagged_result._logging import get_logger
from tagged_result.errors import UnwrapError
from tagged_result.variant import Variant

if TYPE_CHECKING:
    from tagged_result.async_.result import AsyncResult
    from tagged_result.option import Option

__all__ = [
    'Err',
    'Ok',
    'Result',
    'all_ok',
    'any_ok',
    'collect',
    'is_result',
    'wrap',
    'wrap_async',
]

logger = get_logger(__name__)


def _cause(payload: object) -> BaseException | None:
    return payload if isinstance(payload, BaseException) else None


class Ok[T](Variant, frozen=True, gc=False, tag='Ok'):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the value when it is itself iterable, else yield nothing."""
        if isinstance(self.value, Iterable):
            return iter(self.value)
        return iter(())

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def safe_unwrap(self) -> T:
        """Return the contained value; only defined on Ok.

        Unlike unwrap(), this is not available on Err, so a type checker
        rejects it unless the Result has already been narrowed to Ok, and
        flags the call site if the error case later becomes reachable.
        """
        return self.value

    def unwrap_or[U](self, default: U) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def else_[U](self, default: U) -> T:
        """Deprecated alias for unwrap_or()."""
        warnings.warn('else_() is deprecated, use unwrap_or()', DeprecationWarning, stacklevel=2)
        return self.value

    def unwrap_or_else[U](self, f: Callable[[Any], U]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise since this is Ok.

        Raises:
            UnwrapError: Always, with the given message.
        """
        raise UnwrapError(msg, self.value)

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as bind. Exactly one level: whatever f returns is the
        result, see flat_map() for collapsing nested Results.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def flat_map(self, f: Callable[[T], Any]) -> Ok[Any] | Err[Any]:
        """Apply f and collapse any nesting of Results it returns.

        ``Ok`` layers whose payload is itself a Result are peeled off until
        an Err is reached (returned as is) or the payload is a plain value.
        A plain value returned directly by f is wrapped in Ok.

        Examples:
            >>> Ok(Ok(Ok('x'))).flat_map(lambda v: v)
            Ok(value='x')
            >>> Ok(1).flat_map(lambda v: Ok(Err('bad')))
            Err(error='bad')
        """
        out = f(self.value)
        while isinstance(out, Ok) and isinstance(out.value, Ok | Err):
            out = out.value
        if isinstance(out, Ok | Err):
            return out
        return Ok(out)

    def to_option(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from tagged_result.option import Some

        return Some(self.value)

    def to_async[E](self) -> AsyncResult[T, E]:
        """Lift into an AsyncResult for composition with async code."""
        from tagged_result.async_.result import AsyncResult

        return AsyncResult(self)


class Err[E](Variant, frozen=True, gc=False, tag='Err'):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed or propagated. There is no safe_unwrap()
    on Err.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def __iter__(self) -> Iterator[Any]:
        """Yield nothing since there is no Ok value."""
        return iter(())

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        If the error is an exception it becomes the ``__cause__`` of the
        raised UnwrapError.

        Raises:
            UnwrapError: Always, embedding the rendered error.
        """
        raise UnwrapError(f'Tried to unwrap Err: {to_display(self.error)}', self.error) from _cause(self.error)

    def unwrap_or[U](self, default: U) -> U:
        """Return the default value since this is Err."""
        return default

    def else_[U](self, default: U) -> U:
        """Deprecated alias for unwrap_or()."""
        warnings.warn('else_() is deprecated, use unwrap_or()', DeprecationWarning, stacklevel=2)
        return default

    def unwrap_or_else[U](self, f: Callable[[E], U]) -> U:
        """Compute a default value from the error."""
        return f(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with the message and the rendered error.
        """
        raise UnwrapError(f'{msg} - Error: {to_display(self.error)}', self.error) from _cause(self.error)

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def map[U](self, _f: Callable[[Any], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_then(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def flat_map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def to_option(self) -> Option[Any]:
        """Convert to Option, returning Nothing; the error is discarded."""
        from tagged_result.option import Nothing

        return Nothing

    def to_async[T](self) -> AsyncResult[T, E]:
        """Lift into an AsyncResult for composition with async code."""
        from tagged_result.async_.result import AsyncResult

        return AsyncResult(self)


type Result[T, E = Exception] = Ok[T] | Err[E]


def is_result(value: object) -> TypeIs[Ok[Any] | Err[Any]]:
    """Return True if value is an Ok or an Err."""
    return isinstance(value, Ok | Err)


def all_ok[T, E](*results: Ok[T] | Err[E]) -> Ok[list[T]] | Err[E]:
    """Collect Results into a Result of list.

    Short-circuits on the leftmost Err, which is returned unchanged.

    Examples:
        >>> all_ok(Ok(1), Ok(2))
        Ok(value=[1, 2])
        >>> all_ok(Ok(1), Err('a'), Err('b'))
        Err(error='a')
        >>> all_ok()
        Ok(value=[])
    """
    return collect(results)


def any_ok[T, E](*results: Ok[T] | Err[E]) -> Ok[T] | Err[list[E]]:
    """Return the leftmost Ok, or an Err of every error in order.

    Examples:
        >>> any_ok(Err('a'), Ok(2))
        Ok(value=2)
        >>> any_ok(Err('a'), Err('b'))
        Err(error=['a', 'b'])
        >>> any_ok()
        Err(error=[])
    """
    errors: list[E] = []
    for result in results:
        if isinstance(result, Ok):
            return result
        errors.append(result.error)
    return Err(errors)


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def wrap[T](
    operation: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Ok[T] | Err[Any]:
    """Call operation and capture a raised exception as Err.

    Args:
        operation: Zero-argument callable.
        exceptions: Exception types to capture. Defaults to the configured
            ``capture_exceptions`` (``(Exception,)`` unless changed by init()).

    Returns:
        Ok(return value), or Err(exception) if one of ``exceptions`` was raised.

    Examples:
        >>> wrap(lambda: 42)
        Ok(value=42)
        >>> wrap(lambda: int('x')).is_err()
        True
    """
    catch = exceptions if exceptions is not None else get_config().capture_exceptions
    try:
        return Ok(operation())
    except catch as exc:
        logger.debug('exception captured as Err', operation=_name_of(operation), error=to_display(exc))
        return Err(exc)


def wrap_async[T](
    operation: Callable[[], Awaitable[T]],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> AsyncResult[T, Any]:
    """Async counterpart of wrap().

    The returned AsyncResult resolves to Ok(awaited value), or to Err if the
    awaitable fails or operation raises before producing it. Nothing runs
    until the AsyncResult is awaited.

    Example:
        ```python
        result = await wrap_async(lambda: client.get('/health'))
        ```
    """
    from tagged_result.async_.result import AsyncResult

    catch = exceptions if exceptions is not None else get_config().capture_exceptions

    async def _wrapped() -> Ok[T] | Err[Any]:
        try:
            return Ok(await operation())
        except catch as exc:
            logger.debug('exception captured as Err', operation=_name_of(operation), error=to_display(exc))
            return Err(exc)

    return AsyncResult(_wrapped())


def _name_of(operation: Callable[..., Any]) -> str:
    return getattr(operation, '__qualname__', None) or repr(operation)
