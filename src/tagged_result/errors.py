"""Exceptions raised on misuse of Result, Option and Variant values.

Expected failures travel as ``Err`` / ``Nothing`` payloads and are never
raised. The classes here cover programmer errors only: unwrapping the wrong
case, or matching a variant without a handler for its tag.
"""

from __future__ import annotations

__all__ = [
    'MatchError',
    'UnwrapError',
]


class UnwrapError(RuntimeError):
    """Raised by ``unwrap``/``expect``/``expect_err`` on the wrong case.

    Attributes:
        payload: The payload of the case that was unwrapped (the error of an
            ``Err``, the value of an ``Ok``, or None for ``Nothing``).
    """

    def __init__(self, message: str, payload: object = None) -> None:
        self.payload = payload
        super().__init__(message)


class MatchError(TypeError):
    """Raised when ``match`` has neither a handler for the tag nor ``_``."""

    def __init__(self, tag: str, handled: tuple[str, ...]) -> None:
        self.tag = tag
        self.handled = handled
        super().__init__(f'No handler for variant {tag!r} and no wildcard (handled: {", ".join(handled) or "none"})')
