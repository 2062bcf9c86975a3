"""AsyncResult type for async-aware Result operations.

AsyncResult wraps a Result, or an Awaitable[Result[T, E]], and provides
transformation methods that compose without awaiting anything until the
final Result is needed.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, Error]:
        ...

    result = await (
        AsyncResult(fetch_user(1))
        .and_then(validate_user)
        .map(format_response)
    )
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

import aiologic

from tagged_result.result import Err, Ok, Result, is_result

__all__ = ['AsyncResult']


async def _settle[X](value: X | Awaitable[X]) -> X:
    """Await value if it is awaitable, else return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


class AsyncResult[T, E]:
    """Async-aware Result wrapper for composing async Result operations.

    Composition methods return new AsyncResult instances immediately. The
    wrapped work only runs when the chain is awaited; await is the single
    suspension point.

    The first resolution is memoized under an aiologic lock, so an
    AsyncResult can be awaited any number of times, concurrently or not, and
    the underlying awaitable runs once. If it raises, the same exception is
    raised again by every later await.

    Example:
        ```python
        async def main():
            result = await AsyncResult(Ok(1)).and_then(lambda v: Ok(v * 2))
            assert result == Ok(2)
        ```
    """

    __slots__ = ('_awaitable', '_failure', '_lock', '_resolved')

    def __init__(self, start: Result[T, E] | Awaitable[Result[T, E]]) -> None:
        """Create an AsyncResult from a Result or an awaitable of one.

        Args:
            start: A resolved Result, or an awaitable that produces one.
        """
        self._lock = aiologic.Lock()
        self._failure: Exception | None = None
        self._resolved: Result[T, E] | None
        self._awaitable: Awaitable[Result[T, E]] | None
        if is_result(start):
            self._resolved = start
            self._awaitable = None
        else:
            self._resolved = None
            self._awaitable = start

    async def _resolve(self) -> Result[T, E]:
        if self._resolved is not None:
            return self._resolved
        async with self._lock:
            if self._failure is not None:
                raise self._failure
            if self._resolved is None:
                if self._awaitable is None:
                    msg = 'AsyncResult was cancelled while resolving and cannot be awaited again'
                    raise RuntimeError(msg)
                awaitable, self._awaitable = self._awaitable, None
                try:
                    self._resolved = await awaitable
                except Exception as exc:
                    self._failure = exc
                    raise
        return self._resolved

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        """Support await syntax to get the underlying Result."""
        return self._resolve().__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult containing Ok(value)."""
        return cls(Ok(value))

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult containing Err(error)."""
        return cls(Err(error))

    def and_then[U, F](
        self,
        mapper: Callable[[T], Result[U, F] | Awaitable[Result[U, F]]],
    ) -> AsyncResult[U, E | F]:
        """Chain a function returning a Result, an awaitable Result or an AsyncResult.

        If the resolved Result is Err it is passed through and mapper is not
        called.

        Example:
            ```python
            async def example():
                result = await AsyncResult(Ok(5)).and_then(lambda x: Ok(x) if x > 0 else Err('not positive'))
                assert result == Ok(5)
            ```
        """

        async def _chained() -> Result[U, E | F]:
            result = await self
            if isinstance(result, Err):
                return result
            return await _settle(mapper(result.value))

        return AsyncResult(_chained())

    def map[U](self, mapper: Callable[[T], U | Awaitable[U]]) -> AsyncResult[U, E]:
        """Apply a sync or async function to the Ok value and wrap it in Ok.

        Example:
            ```python
            async def double(x: int) -> int:
                return x * 2

            async def example():
                assert await AsyncResult(Ok(5)).map(double) == Ok(10)
            ```
        """

        async def _mapped() -> Result[U, E]:
            result = await self
            if isinstance(result, Err):
                return result
            return Ok(await _settle(mapper(result.value)))

        return AsyncResult(_mapped())

    def map_err[F](self, mapper: Callable[[E], F | Awaitable[F]]) -> AsyncResult[T, F]:
        """Apply a sync or async function to the Err value and wrap it in Err."""

        async def _mapped() -> Result[T, F]:
            result = await self
            if isinstance(result, Ok):
                return result
            return Err(await _settle(mapper(result.error)))

        return AsyncResult(_mapped())

    def or_else[F](
        self,
        mapper: Callable[[E], Result[T, F] | Awaitable[Result[T, F]]],
    ) -> AsyncResult[T, F]:
        """Recover from an Err with a function returning a (possibly async) Result."""

        async def _recovered() -> Result[T, F]:
            result = await self
            if isinstance(result, Ok):
                return result
            return await _settle(mapper(result.error))

        return AsyncResult(_recovered())

    def unwrap_or[U](self, default: U) -> Coroutine[Any, Any, T | U]:
        """Resolve and return the Ok value or the default."""

        async def _unwrap() -> T | U:
            result = await self
            if isinstance(result, Ok):
                return result.value
            return default

        return _unwrap()

    def __repr__(self) -> str:
        if self._resolved is not None:
            return f'AsyncResult({self._resolved!r})'
        if self._failure is not None:
            return f'AsyncResult(<failed: {self._failure!r}>)'
        return f'AsyncResult({self._awaitable!r})'
