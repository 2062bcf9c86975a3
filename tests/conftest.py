"""Pytest configuration and shared fixtures for tagged-result tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from tagged_result import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from tagged_result import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from tagged_result import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from tagged_result import Nothing

    return Nothing


@pytest.fixture
def reset_config(monkeypatch):
    """Restore the process-wide configuration after the test."""
    import tagged_result._config

    monkeypatch.setattr(tagged_result._config, '_config', None)
