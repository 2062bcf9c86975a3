"""Result-aware stream operators.

Streams are async iterables. Each function here builds an operator (a
callable from a source stream to a new stream) that applies a Result
combinator per event. Compose them with pipe().

The switch/merge operators read the outer stream in a driver task that runs
their inner streams in an anyio task group and hands events back through a
memory object stream. The driver starts on the first ``__anext__`` and is
cancelled by ``aclose()``, or once the consumer drops the stream (a plain
``break`` out of ``async for``), which stops the outer and inner streams.

Example:
    ```python
    async def main():
        stream = pipe(
            of(Ok(1), Err('x'), Ok(2)),
            tap_result_err(print),
            filter_result_ok(),
        )
        assert [v async for v in stream] == [1, 2]
    ```
"""

from __future__ import annotations

import asyncio
import inspect
import math
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable
from typing import Any

import anyio
from anyio.abc import ObjectSendStream, TaskStatus

from tagged_result._logging import get_logger
from tagged_result.result import Err, Ok, Result, is_result
from tagged_result.streams.sources import Operator

__all__ = [
    'else_map',
    'else_map_to',
    'filter_result_err',
    'filter_result_ok',
    'result_map',
    'result_map_err',
    'result_map_err_to',
    'result_map_to',
    'result_merge_map',
    'result_switch_map',
    'tap_result_err',
    'tap_result_ok',
]

logger = get_logger(__name__)


def result_map[T, U, E](f: Callable[[T], U]) -> Operator[Result[T, E], Result[U, E]]:
    """Apply ``Result.map(f)`` to every event."""

    async def _operator(source: AsyncIterable[Result[T, E]]) -> AsyncIterator[Result[U, E]]:
        async for result in source:
            yield result.map(f)

    return _operator


def result_map_err[T, E, F](f: Callable[[E], F]) -> Operator[Result[T, E], Result[T, F]]:
    """Apply ``Result.map_err(f)`` to every event."""

    async def _operator(source: AsyncIterable[Result[T, E]]) -> AsyncIterator[Result[T, F]]:
        async for result in source:
            yield result.map_err(f)

    return _operator


def result_map_to[T, U, E](value: U) -> Operator[Result[T, E], Result[U, E]]:
    """Replace the payload of every Ok event with value."""
    return result_map(lambda _: value)


def result_map_err_to[T, E, F](error: F) -> Operator[Result[T, E], Result[T, F]]:
    """Replace the payload of every Err event with error."""
    return result_map_err(lambda _: error)


def else_map[T, E, U](f: Callable[[E], U]) -> Operator[Result[T, E], T | U]:
    """Emit the Ok payload, or f(error) for an Err. The output is unwrapped."""

    async def _operator(source: AsyncIterable[Result[T, E]]) -> AsyncIterator[T | U]:
        async for result in source:
            if isinstance(result, Ok):
                yield result.value
            else:
                yield f(result.error)

    return _operator


def else_map_to[T, E, U](value: U) -> Operator[Result[T, E], T | U]:
    """Emit the Ok payload, or value for an Err."""
    return else_map(lambda _: value)


def filter_result_ok[T, E]() -> Operator[Result[T, E], T]:
    """Drop Err events and emit the payload of each Ok."""

    async def _operator(source: AsyncIterable[Result[T, E]]) -> AsyncIterator[T]:
        async for result in source:
            if isinstance(result, Ok):
                yield result.value

    return _operator


def filter_result_err[T, E]() -> Operator[Result[T, E], E]:
    """Drop Ok events and emit the payload of each Err."""

    async def _operator(source: AsyncIterable[Result[T, E]]) -> AsyncIterator[E]:
        async for result in source:
            if isinstance(result, Err):
                yield result.error

    return _operator


def tap_result_ok[T, E](f: Callable[[T], Any]) -> Operator[Result[T, E], Result[T, E]]:
    """Call f with each Ok payload; every event is re-emitted unchanged."""

    async def _operator(source: AsyncIterable[Result[T, E]]) -> AsyncIterator[Result[T, E]]:
        async for result in source:
            if isinstance(result, Ok):
                f(result.value)
            yield result

    return _operator


def tap_result_err[T, E](f: Callable[[E], Any]) -> Operator[Result[T, E], Result[T, E]]:
    """Call f with each Err payload; every event is re-emitted unchanged."""

    async def _operator(source: AsyncIterable[Result[T, E]]) -> AsyncIterator[Result[T, E]]:
        async for result in source:
            if isinstance(result, Err):
                f(result.error)
            yield result

    return _operator


def result_switch_map[T, E](mapper: Callable[[T], Any]) -> Operator[Result[T, E], Result[Any, Any]]:
    """Map each Ok to an inner stream, following only the latest one.

    mapper may return an async iterable, an iterable, an awaitable or a
    single Result. Inner values that are not Results are wrapped in Ok. Err
    events skip mapper and are emitted as they are. Any new outer event
    cancels the inner stream started for the previous one; what it had not
    emitted yet is discarded.
    """
    return _flatten(mapper, switch=True)


def result_merge_map[T, E](mapper: Callable[[T], Any]) -> Operator[Result[T, E], Result[Any, Any]]:
    """Map each Ok to an inner stream and interleave all of them.

    Same inputs as result_switch_map(), but every inner stream runs to
    completion concurrently. Order is kept within one inner stream only.
    """
    return _flatten(mapper, switch=False)


def _flatten[T, E](mapper: Callable[[T], Any], *, switch: bool) -> Operator[Result[T, E], Result[Any, Any]]:
    def _operator(source: AsyncIterable[Result[T, E]]) -> AsyncIterator[Result[Any, Any]]:
        return _FlattenedStream(source, mapper, switch=switch)

    return _operator


class _FlattenedStream[T, E]:
    """Async iterator over the events of a switch/merge operator.

    No cancel scope is held open between two ``__anext__`` calls: the task
    group lives in the driver task, which is created on first use and can be
    cancelled from anywhere, including ``__del__``.
    """

    __slots__ = ('_closed', '_mapper', '_receive', '_send', '_source', '_switch', '_task')

    def __init__(self, source: AsyncIterable[Result[T, E]], mapper: Callable[[T], Any], *, switch: bool) -> None:
        self._closed = False
        self._source = source
        self._mapper = mapper
        self._switch = switch
        self._send, self._receive = anyio.create_memory_object_stream(math.inf)
        self._task: asyncio.Task[None] | None = None

    def __aiter__(self) -> _FlattenedStream[T, E]:
        return self

    async def __anext__(self) -> Result[Any, Any]:
        if self._closed:
            raise StopAsyncIteration
        if self._task is None:
            self._task = asyncio.create_task(_drive(self._source, self._mapper, self._send, self._switch))
        try:
            return await self._receive.receive()
        except anyio.EndOfStream:
            # The driver closed its send side: finished, or failed.
            self._closed = True
            self._receive.close()
            await self._task
            raise StopAsyncIteration from None

    async def aclose(self) -> None:
        """Stop the driver and every inner stream, then wait for them to finish."""
        task = self._task
        self._shutdown()
        if task is not None:
            await asyncio.wait({task})

    def _shutdown(self) -> None:
        self._closed = True
        self._receive.close()
        if self._task is None:
            self._send.close()
        elif not self._task.done() and not self._task.get_loop().is_closed():
            self._task.cancel()

    def __del__(self) -> None:
        if not self._closed:
            self._shutdown()


async def _drive[T, E](
    source: AsyncIterable[Result[T, E]],
    mapper: Callable[[T], Any],
    send: ObjectSendStream[Result[Any, Any]],
    switch: bool,
) -> None:
    """Read the outer stream and start one pump per Ok event."""
    async with send, anyio.create_task_group() as inner:
        active: anyio.CancelScope | None = None
        async for result in source:
            if active is not None:
                active.cancel()
                logger.debug('inner stream abandoned by switch')
                active = None
            if isinstance(result, Err):
                await send.send(result)
                continue
            scope = await inner.start(_pump, mapper(result.value), send)
            if switch:
                active = scope


async def _pump(
    inner: Any,
    send: ObjectSendStream[Result[Any, Any]],
    *,
    task_status: TaskStatus[anyio.CancelScope] = anyio.TASK_STATUS_IGNORED,
) -> None:
    """Forward one inner stream to send, inside its own cancel scope."""
    with anyio.CancelScope() as scope:
        task_status.started(scope)
        async for item in _iterate(inner):
            await send.send(item if is_result(item) else Ok(item))


async def _iterate(inner: Any) -> AsyncIterator[Any]:
    if is_result(inner):
        yield inner
    elif isinstance(inner, AsyncIterable):
        async for item in inner:
            yield item
    elif inspect.isawaitable(inner):
        yield await inner
    elif isinstance(inner, Iterable):
        for item in inner:
            yield item
    else:
        msg = f'mapper must return a stream, iterable, awaitable or Result, got {type(inner).__name__}'
        raise TypeError(msg)
