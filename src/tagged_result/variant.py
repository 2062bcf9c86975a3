"""Variant: base class for closed tagged unions with match/tap dispatch.

A variant case is a frozen ``msgspec.Struct`` whose struct tag names the case
and whose fields are its positional payload. ``Ok``/``Err`` and
``Some``/``Nothing`` are built on it, and so can user-defined unions.

Example:
    ```python
    class Circle(Variant, tag='Circle'):
        radius: float

    class Square(Variant, tag='Square'):
        side: float

    type Shape = Circle | Square

    def area(shape: Shape) -> float:
        return shape.match(
            Circle=lambda r: 3.14159 * r * r,
            Square=lambda s: s * s,
        )
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

import msgspec

from tagged_result._display import to_display
from tagged_result.errors import MatchError

__all__ = ['Variant']


class Variant(msgspec.Struct, frozen=True, gc=False, tag=True):
    """Base for one case of a closed union.

    The tag defaults to the class name; pass ``tag='...'`` in the class
    statement to choose another. Payload fields are declared as struct fields
    and are passed to handlers positionally, in declaration order.
    """

    @property
    def tag(self) -> str:
        """The tag string identifying this case."""
        return type(self).__struct_config__.tag  # type: ignore[return-value]

    @property
    def args(self) -> tuple[Any, ...]:
        """The payload values, in field order."""
        return msgspec.structs.astuple(self)

    def match[R](self, **handlers: Callable[..., R]) -> R:
        """Dispatch on the tag and return the handler's result.

        Handlers are keyword arguments named after tags and receive the
        payload positionally. ``_`` is a wildcard called with no arguments
        when no handler names the current tag.

        Raises:
            MatchError: If neither a handler for the tag nor ``_`` is given.
        """
        handler = handlers.get(self.tag)
        if handler is not None:
            return handler(*self.args)
        wildcard = handlers.get('_')
        if wildcard is not None:
            return wildcard()
        raise MatchError(self.tag, tuple(handlers))

    def tap(self, **handlers: Callable[..., Any]) -> Self:
        """Run the handler for the current tag, if any, and return self."""
        handler = handlers.get(self.tag)
        if handler is not None:
            handler(*self.args)
        return self

    def __str__(self) -> str:
        args = self.args
        if not args:
            return self.tag
        return f'{self.tag}({", ".join(to_display(arg) for arg in args)})'
