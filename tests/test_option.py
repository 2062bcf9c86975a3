"""Tests for Option type (Some and Nothing)."""

import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st
from tagged_result import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Some,
    UnwrapError,
    all_some,
    any_some,
    is_option,
)

from tests.strategies import options, payloads


class TestSomeCreation:
    """Tests for Some instantiation and basic properties."""

    def test_some_creation(self):
        """Some wraps a value."""
        some = Some(42)
        assert some.value == 42

    def test_some_with_none(self):
        """Some can wrap None (Some(None) is not Nothing)."""
        some = Some(None)
        assert some.value is None
        assert some != Nothing

    def test_some_is_frozen(self):
        """Some instances are immutable."""
        some = Some(42)
        with pytest.raises(AttributeError):
            some.value = 100  # type: ignore[misc]


class TestNothingCreation:
    """Tests for the Nothing singleton."""

    def test_nothing_is_nothing_type(self):
        assert isinstance(Nothing, NothingType)

    def test_nothing_type_instances_equal(self):
        """Any NothingType instance equals Nothing."""
        assert NothingType() == Nothing

    def test_nothing_is_frozen(self):
        with pytest.raises(AttributeError):
            Nothing.value = 1  # type: ignore[attr-defined]


class TestOptionEquality:
    """Tests for Option equality and hashing."""

    def test_some_equality(self):
        assert Some(42) == Some(42)
        assert Some(42) != Some(43)

    def test_some_not_equal_to_nothing(self):
        assert Some(42) != Nothing

    def test_some_not_equal_to_ok(self):
        """Some and Ok with the same payload are different cases."""
        assert Some(1) != Ok(1)

    def test_hashable(self):
        assert hash(Some(42)) == hash(Some(42))
        assert hash(Nothing) == hash(NothingType())


class TestOptionQuerying:
    """Tests for is_some() and is_none()."""

    def test_some(self, sample_some):
        assert sample_some.is_some() is True
        assert sample_some.is_none() is False

    def test_nothing(self, sample_nothing):
        assert sample_nothing.is_some() is False
        assert sample_nothing.is_none() is True

    @given(options)
    def test_tag_exclusivity(self, option):
        """Exactly one of is_some/is_none holds for any Option."""
        assert option.is_some() != option.is_none()

    def test_is_option(self):
        assert is_option(Some(1))
        assert is_option(Nothing)
        assert not is_option(Ok(1))
        assert not is_option(None)


class TestOptionUnwrap:
    """Tests for unwrap, unwrap_or, unwrap_or_else, expect, safe_unwrap."""

    def test_some_unwrap(self):
        assert Some(42).unwrap() == 42

    def test_nothing_unwrap_raises(self):
        with pytest.raises(UnwrapError, match='Tried to unwrap Nothing'):
            Nothing.unwrap()

    def test_unwrap_or(self):
        assert Some(42).unwrap_or(0) == 42
        assert Nothing.unwrap_or(0) == 0

    def test_else_is_deprecated_alias(self):
        with pytest.warns(DeprecationWarning):
            assert Nothing.else_('default') == 'default'

    def test_some_unwrap_or_else(self):
        """Some.unwrap_or_else() never calls the function."""
        called = False

        def factory():
            nonlocal called
            called = True
            return 0

        assert Some(42).unwrap_or_else(factory) == 42
        assert called is False

    def test_nothing_unwrap_or_else(self):
        assert Nothing.unwrap_or_else(lambda: 100) == 100

    def test_some_expect(self):
        assert Some(42).expect('should not fail') == 42

    def test_nothing_expect_raises(self):
        """Nothing.expect() raises with exactly the message."""
        with pytest.raises(UnwrapError, match='^value required$'):
            Nothing.expect('value required')

    def test_safe_unwrap_only_on_some(self):
        option = Some('x')
        if option.is_some():
            assert option.safe_unwrap() == 'x'
        assert not hasattr(Nothing, 'safe_unwrap')


class TestOptionMap:
    """Tests for map, map_or and map_or_else."""

    def test_some_map(self):
        assert Some(5).map(lambda x: x * 2) == Some(10)

    def test_some_map_chain(self):
        assert Some(5).map(lambda x: x * 2).map(str) == Some('10')

    def test_nothing_map(self):
        assert Nothing.map(lambda x: pytest.fail('must not be called')) is Nothing

    def test_map_or(self):
        assert Some(2).map_or(0, lambda x: x * 3) == 6
        assert Nothing.map_or(0, lambda x: x * 3) == 0

    def test_map_or_else(self):
        assert Some(2).map_or_else(lambda: -1, lambda x: x * 3) == 6
        assert Nothing.map_or_else(lambda: -1, lambda x: x * 3) == -1


class TestOptionAndThen:
    """Tests for and_then, flat_map, or_ and or_else."""

    def test_some_and_then_returns_some(self):
        assert Some(5).and_then(lambda x: Some(x * 2)) == Some(10)

    def test_some_and_then_returns_nothing(self):
        assert Some(5).and_then(lambda x: Nothing) is Nothing

    def test_nothing_and_then(self):
        assert Nothing.and_then(lambda x: Some(x)) is Nothing

    def test_flat_map_collapses_nested_some(self):
        assert Some(Some(Some(1))).flat_map(lambda v: v) == Some(1)
        assert Some(1).flat_map(lambda v: Some(Nothing)) is Nothing

    def test_flat_map_wraps_plain_value(self):
        assert Some(1).flat_map(lambda v: v + 1) == Some(2)

    def test_or(self):
        assert Some(1).or_(Some(2)) == Some(1)
        assert Nothing.or_(Some(2)) == Some(2)
        assert Nothing.or_(Nothing) is Nothing

    def test_some_or_else_does_not_call(self):
        assert Some(1).or_else(lambda: pytest.fail('must not be called')) == Some(1)

    def test_nothing_or_else(self):
        assert Nothing.or_else(lambda: Some(5)) == Some(5)
        assert Nothing.or_else(lambda: Nothing) is Nothing


class TestOptionFilter:
    """Tests for filter."""

    def test_some_filter_passes(self):
        assert Some(4).filter(lambda x: x % 2 == 0) == Some(4)

    def test_some_filter_fails(self):
        assert Some(3).filter(lambda x: x % 2 == 0) is Nothing

    def test_nothing_filter(self):
        assert Nothing.filter(lambda x: True) is Nothing


class TestOptionConversion:
    """Tests for to_result."""

    def test_some_to_result(self):
        assert Some(42).to_result('missing') == Ok(42)

    def test_nothing_to_result(self):
        assert Nothing.to_result('missing') == Err('missing')


class TestOptionIteration:
    """Tests for iterating over Options."""

    def test_some_of_iterable(self):
        assert list(Some('ab')) == ['a', 'b']

    def test_some_of_scalar(self):
        assert list(Some(1)) == []

    def test_nothing(self):
        assert list(Nothing) == []


class TestAllSome:
    """Tests for all_some()."""

    def test_all_some(self):
        assert all_some(Some(1), Some(2)) == Some([1, 2])

    def test_all_some_with_nothing(self):
        assert all_some(Some(1), Nothing, Some(3)) is Nothing

    def test_all_some_empty(self):
        assert all_some() == Some([])


class TestAnySome:
    """Tests for any_some()."""

    def test_any_some_leftmost(self):
        assert any_some(Nothing, Some(2), Some(3)) == Some(2)

    def test_any_some_all_nothing(self):
        assert any_some(Nothing, Nothing) is Nothing

    def test_any_some_empty(self):
        assert any_some() is Nothing


class TestOptionPatternMatching:
    """Tests for structural pattern matching and Variant dispatch."""

    def test_match_some(self):
        match Some(42):
            case Some(value):
                assert value == 42
            case NothingType():
                pytest.fail('Should not match Nothing')

    def test_match_nothing(self):
        match Nothing:
            case Some():
                pytest.fail('Should not match Some')
            case NothingType():
                pass

    def test_match_method(self):
        assert Some(3).match(Some=lambda v: v + 1, Nothing=lambda: 0) == 4
        assert Nothing.match(Some=lambda v: v + 1, Nothing=lambda: 0) == 0


class TestOptionRepr:
    """Tests for repr, str and copying."""

    def test_some_repr(self):
        assert repr(Some(42)) == 'Some(value=42)'

    def test_nothing_repr(self):
        assert repr(Nothing) == 'Nothing'

    def test_str(self):
        assert str(Some([1, 2])) == 'Some([1,2])'
        assert str(Nothing) == 'Nothing'

    def test_some_copy(self):
        some = Some([1, 2])
        copied = copy.copy(some)
        assert copied == some
        assert copied.value is some.value


class TestOptionFunctorLaws:
    """Property-based tests for functor and monad laws."""

    @given(options)
    def test_identity(self, m):
        assert m.map(lambda x: x) == m

    @given(st.integers())
    def test_left_identity(self, value: int):
        def f(x: int):
            return Some(x - 1) if x > 0 else Nothing

        assert Some(value).and_then(f) == f(value)

    @given(options)
    def test_right_identity(self, m):
        assert m.and_then(Some) == m

    @given(payloads)
    def test_to_result_round_trip(self, value):
        assert Some(value).to_result('e').to_option() == Some(value)
