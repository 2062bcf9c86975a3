"""Tests for configuration and initialization."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from tagged_result import ResultConfig, get_config, init, wrap
from tagged_result._config import _detect_json_logs, _detect_log_level


@pytest.fixture(autouse=True)
def _fresh_config(reset_config: None) -> None:
    """Every test starts with init() never called."""


class TestResultConfig:
    """Tests for the ResultConfig dataclass."""

    def test_default_values(self) -> None:
        config = ResultConfig()
        assert config.log_level is None
        assert config.json_logs is True
        assert config.capture_exceptions == (Exception,)

    def test_custom_values(self) -> None:
        config = ResultConfig(log_level='DEBUG', json_logs=False, capture_exceptions=(OSError,))
        assert config.log_level == 'DEBUG'
        assert config.json_logs is False
        assert config.capture_exceptions == (OSError,)

    def test_config_is_frozen(self) -> None:
        config = ResultConfig()
        with pytest.raises(AttributeError):
            config.json_logs = False  # type: ignore[misc]


class TestDetectLogLevel:
    """Tests for _detect_log_level()."""

    def test_env_level_is_uppercased(self) -> None:
        with patch.dict(os.environ, {'TAGGED_RESULT_LOG_LEVEL': 'debug'}):
            assert _detect_log_level() == 'DEBUG'

    def test_empty_env_is_none(self) -> None:
        with patch.dict(os.environ, {'TAGGED_RESULT_LOG_LEVEL': '  '}):
            assert _detect_log_level() is None

    def test_no_env_is_none(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None


class TestDetectJsonLogs:
    """Tests for _detect_json_logs()."""

    @pytest.mark.parametrize('value', ['1', 'true', 'YES', 'on'])
    def test_true_values(self, value: str) -> None:
        with patch.dict(os.environ, {'TAGGED_RESULT_JSON_LOGS': value}):
            assert _detect_json_logs() is True

    @pytest.mark.parametrize('value', ['0', 'false', 'No', 'off'])
    def test_false_values(self, value: str) -> None:
        with patch.dict(os.environ, {'TAGGED_RESULT_JSON_LOGS': value}):
            assert _detect_json_logs() is False

    def test_unknown_value_defaults_to_json(self) -> None:
        with patch.dict(os.environ, {'TAGGED_RESULT_JSON_LOGS': 'maybe'}):
            assert _detect_json_logs() is True

    def test_no_env_defaults_to_json(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_json_logs() is True


class TestInit:
    """Tests for init()."""

    def test_init_with_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        assert config == ResultConfig()

    def test_init_with_log_level(self) -> None:
        config = init(log_level='debug', json_logs=False)
        assert config.log_level == 'DEBUG'
        assert config.json_logs is False

    def test_init_reads_environment(self) -> None:
        with patch.dict(os.environ, {'TAGGED_RESULT_LOG_LEVEL': 'info', 'TAGGED_RESULT_JSON_LOGS': 'false'}):
            config = init()
        assert config.log_level == 'INFO'
        assert config.json_logs is False

    def test_init_with_capture_exceptions(self) -> None:
        config = init(capture_exceptions=(LookupError,))
        assert config.capture_exceptions == (LookupError,)

    def test_init_rejects_empty_capture(self) -> None:
        with pytest.raises(ValueError, match='capture_exceptions'):
            init(capture_exceptions=())


class TestGetConfig:
    """Tests for get_config()."""

    def test_get_config_before_init_returns_defaults(self) -> None:
        assert get_config() == ResultConfig()

    def test_get_config_after_init(self) -> None:
        config = init(capture_exceptions=(KeyError,))
        assert get_config() is config

    def test_capture_exceptions_drive_wrap(self) -> None:
        """wrap() captures only the configured exception types by default."""
        init(capture_exceptions=(KeyError,))
        assert wrap(lambda: {}['missing']).is_err()
        with pytest.raises(ZeroDivisionError):
            wrap(lambda: 1 / 0)
