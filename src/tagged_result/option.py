"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

import warnings
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

from tagged_result.errors import UnwrapError
from tagged_result.variant import Variant

if TYPE_CHECKING:
    from tagged_result.result import Err, Ok

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'all_some',
    'any_some',
    'is_option',
]


class Some[T](Variant, frozen=True, gc=False, tag='Some'):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or propagated through a chain of Option-returning
    operations.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> some.to_result('missing')
        Ok(value=42)
    """

    value: T

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the value when it is itself iterable, else yield nothing."""
        if isinstance(self.value, Iterable):
            return iter(self.value)
        return iter(())

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def safe_unwrap(self) -> T:
        """Return the contained value; only defined on Some.

        Type checkers reject the call on an Option that has not been
        narrowed to Some.
        """
        return self.value

    def unwrap_or[U](self, default: U) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def else_[U](self, default: U) -> T:
        """Deprecated alias for unwrap_or()."""
        warnings.warn('else_() is deprecated, use unwrap_or()', DeprecationWarning, stacklevel=2)
        return self.value

    def unwrap_or_else[U](self, f: Callable[[], U]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value); the default is unused."""
        return f(self.value)

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value); the default function is not called."""
        return f(self.value)

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def flat_map(self, f: Callable[[T], Any]) -> Some[Any] | NothingType:
        """Apply f and collapse any nesting of Options it returns.

        ``Some`` layers whose payload is itself an Option are peeled off until
        Nothing or a plain payload is reached. A plain value returned
        directly by f is wrapped in Some.
        """
        out = f(self.value)
        while isinstance(out, Some) and isinstance(out.value, Some | NothingType):
            out = out.value
        if isinstance(out, Some | NothingType):
            return out
        return Some(out)

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self since this is Some."""
        return self

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged; the fallback is not called."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def to_result[E](self, _error: E) -> Ok[T]:
        """Convert to Result, returning Ok(value).

        Args:
            _error: Ignored error value.

        Returns:
            Ok containing the value.
        """
        from tagged_result.result import Ok

        return Ok(self.value)


class NothingType(Variant, frozen=True, gc=False, tag='Nothing'):
    """Nothing variant of Option representing absence of a value.

    Nothing carries no payload and is immutable, so a single shared instance
    is used everywhere: use the ``Nothing`` constant instead of
    instantiating directly. There is no safe_unwrap() on Nothing.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __iter__(self) -> Iterator[Any]:
        """Yield nothing."""
        return iter(())

    def __repr__(self) -> str:
        return 'Nothing'

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            UnwrapError: Always, since Nothing has no value to unwrap.
        """
        raise UnwrapError('Tried to unwrap Nothing')

    def unwrap_or[U](self, default: U) -> U:
        """Return the default value since this is Nothing."""
        return default

    def else_[U](self, default: U) -> U:
        """Deprecated alias for unwrap_or()."""
        warnings.warn('else_() is deprecated, use unwrap_or()', DeprecationWarning, stacklevel=2)
        return default

    def unwrap_or_else[U](self, f: Callable[[], U]) -> U:
        """Compute and return a default value since this is Nothing."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(msg)

    def map[U](self, _f: Callable[[Any], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default since there's no value."""
        return default

    def map_or_else[U](self, default: Callable[[], U], _f: Callable[[Any], U]) -> U:
        """Call and return the default function since there's no value."""
        return default()

    def and_then(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def flat_map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Return the Option produced by f."""
        return f()

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def to_result[E](self, error: E) -> Err[E]:
        """Convert to Result, returning Err(error).

        Args:
            error: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from tagged_result.result import Err

        return Err(error)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def is_option(value: object) -> TypeIs[Some[Any] | NothingType]:
    """Return True if value is a Some or Nothing."""
    return isinstance(value, Some | NothingType)


def all_some[T](*options: Some[T] | NothingType) -> Some[list[T]] | NothingType:
    """Collect Options into an Option of list.

    Returns Nothing as soon as a Nothing is encountered.

    Examples:
        >>> all_some(Some(1), Some(2))
        Some(value=[1, 2])
        >>> all_some(Some(1), Nothing)
        Nothing
    """
    values: list[T] = []
    for option in options:
        if isinstance(option, NothingType):
            return Nothing
        values.append(option.value)
    return Some(values)


def any_some[T](*options: Some[T] | NothingType) -> Some[T] | NothingType:
    """Return the leftmost Some, or Nothing if there is none.

    Examples:
        >>> any_some(Nothing, Some(2), Some(3))
        Some(value=2)
        >>> any_some(Nothing, Nothing)
        Nothing
    """
    for option in options:
        if isinstance(option, Some):
            return option
    return Nothing
