"""Decorator forms of wrap() and wrap_async().

``@safe`` turns a function that raises into one that returns a Result;
``@safe_async`` does the same for coroutine functions. Both accept an
optional ``exceptions=`` tuple and otherwise capture the configured
``capture_exceptions`` (see ``tagged_result.init``), read at call time.

Example:
    ```python
    @safe(exceptions=(KeyError,))
    def lookup(table: dict[str, int], key: str) -> int:
        return table[key]

    lookup({'a': 1}, 'a')  # Ok(value=1)
    lookup({'a': 1}, 'b')  # Err(error=KeyError('b'))
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from tagged_result.result import Err, Ok, wrap, wrap_async

__all__ = ['safe', 'safe_async']

type _Catch = tuple[type[BaseException], ...] | None


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe(func: Callable[..., Any] | None = None, *, exceptions: _Catch = None) -> Any:
    """Make a function return ``Ok(result)`` or ``Err(exception)``.

    Usable bare (``@safe``) or with options (``@safe(exceptions=(OSError,))``).
    Exceptions outside the capture set propagate unchanged.
    """

    @wrapt.decorator
    def _capturing(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return wrap(lambda: wrapped(*args, **kwargs), exceptions=exceptions)

    return _capturing if func is None else _capturing(func)


@overload
def safe_async[**P, T](func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_async[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Ok[T] | Err[E]]]]: ...


def safe_async(func: Callable[..., Awaitable[Any]] | None = None, *, exceptions: _Catch = None) -> Any:
    """Coroutine counterpart of ``@safe``; the decorated function stays awaitable."""

    @wrapt.decorator
    async def _capturing(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        return await wrap_async(lambda: wrapped(*args, **kwargs), exceptions=exceptions)

    return _capturing if func is None else _capturing(func)
