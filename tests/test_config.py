"""Tests for environment-driven configuration."""

import pytest

from cetkaik_naive.config import (
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
    STRICT_INVARIANTS_ENV,
    default_log_format,
    default_log_level,
    env_flag,
    strict_invariants_enabled,
)
from cetkaik_naive.errors import ConfigurationError, ValidationError

FLAG = "CETKAIK_TEST_FLAG"


class TestEnvFlag:
    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv(FLAG, raising=False)
        assert env_flag(FLAG) is False
        assert env_flag(FLAG, default=True) is True

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on", " On "])
    def test_truthy(self, monkeypatch, value):
        monkeypatch.setenv(FLAG, value)
        assert env_flag(FLAG) is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", ""])
    def test_falsy(self, monkeypatch, value):
        monkeypatch.setenv(FLAG, value)
        assert env_flag(FLAG, default=True) is False

    def test_unrecognized_value(self, monkeypatch):
        monkeypatch.setenv(FLAG, "ture")
        with pytest.raises(ConfigurationError) as exc_info:
            env_flag(FLAG)
        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.context == {"value": "ture"}
        assert exc_info.value.code == "CONFIGURATION_ERROR"


class TestNamedFlags:
    def test_strict_invariants_off_by_default(self, monkeypatch):
        monkeypatch.delenv(STRICT_INVARIANTS_ENV, raising=False)
        assert strict_invariants_enabled() is False

    def test_strict_invariants_read_at_call_time(self, monkeypatch):
        monkeypatch.setenv(STRICT_INVARIANTS_ENV, "1")
        assert strict_invariants_enabled() is True
        monkeypatch.setenv(STRICT_INVARIANTS_ENV, "0")
        assert strict_invariants_enabled() is False

    def test_log_level(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert default_log_level() == "INFO"
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert default_log_level() == "DEBUG"

    def test_log_format(self, monkeypatch):
        monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
        assert default_log_format() == "default"
        monkeypatch.setenv(LOG_FORMAT_ENV, "Compact")
        assert default_log_format() == "compact"
