"""Stream sources and composition: of(), from_iterable(), pipe()."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable
from typing import Any

__all__ = [
    'Operator',
    'from_iterable',
    'of',
    'pipe',
]

type Operator[X, Y] = Callable[[AsyncIterable[X]], AsyncIterator[Y]]
"""A stream transformation: takes a source stream, returns a new one."""


async def of[X](*items: X) -> AsyncIterator[X]:
    """Emit the given items in order, then complete."""
    for item in items:
        yield item


async def from_iterable[X](items: Iterable[X] | AsyncIterable[X]) -> AsyncIterator[X]:
    """Emit every item of a sync or async iterable."""
    if isinstance(items, AsyncIterable):
        async for item in items:
            yield item
    else:
        for item in items:
            yield item


def pipe(source: AsyncIterable[Any], *operators: Operator[Any, Any]) -> AsyncIterable[Any]:
    """Apply operators to a stream from left to right.

    Example:
        ```python
        doubled = pipe(of(Ok(1), Err('x')), result_map(lambda v: v * 2), filter_result_ok())
        assert [v async for v in doubled] == [2]
        ```
    """
    stream = source
    for operator in operators:
        stream = operator(stream)
    return stream
