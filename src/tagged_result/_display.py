"""Human-readable rendering of payloads for error messages."""

from __future__ import annotations

import dataclasses

import msgspec

__all__ = ['to_display']

_STRUCTURED = (dict, list, tuple, msgspec.Struct)


def to_display(value: object) -> str:
    """Render a payload for use in an error message.

    Exceptions render as ``"<Type>: <message>"``. Containers, structs and
    dataclasses without their own ``__str__`` are JSON-encoded; if encoding
    fails the plain ``str()`` is used instead.

    Examples:
        >>> to_display({'message': 'bad'})
        '{"message":"bad"}'
        >>> to_display(ValueError('boom'))
        'ValueError: boom'
    """
    if isinstance(value, BaseException):
        return f'{type(value).__name__}: {value}'
    if type(value).__str__ is object.__str__ and (
        isinstance(value, _STRUCTURED) or (dataclasses.is_dataclass(value) and not isinstance(value, type))
    ):
        try:
            return msgspec.json.encode(value).decode()
        except (TypeError, ValueError, OverflowError, msgspec.EncodeError):
            pass
    return str(value)
