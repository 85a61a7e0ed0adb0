"""Tests for package configuration and initialization."""

from __future__ import annotations

import logging

import pytest

from klaw_outcome import Config, get_config, init
from klaw_outcome._config import (
    ENV_JSON_LOGS,
    ENV_LOG_LEVEL,
    ENV_MAX_PAYLOAD_CHARS,
    _from_env,
    reset,
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (ENV_LOG_LEVEL, ENV_JSON_LOGS, ENV_MAX_PAYLOAD_CHARS):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfig:
    """Tests for the Config dataclass."""

    def test_default_values(self) -> None:
        config = Config()
        assert config.log_level is None
        assert config.json_logs is True
        assert config.max_payload_chars == 0

    def test_is_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.log_level = "DEBUG"  # type: ignore[misc]


class TestFromEnv:
    """Tests for reading configuration from the environment."""

    def test_unset_env_uses_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        assert _from_env() == Config()

    def test_env_values(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(ENV_LOG_LEVEL, "debug")
        clean_env.setenv(ENV_JSON_LOGS, "false")
        clean_env.setenv(ENV_MAX_PAYLOAD_CHARS, "50")
        assert _from_env() == Config(log_level="DEBUG", json_logs=False, max_payload_chars=50)

    @pytest.mark.parametrize(
        ("variable", "value"),
        [
            (ENV_LOG_LEVEL, "LOUD"),
            (ENV_JSON_LOGS, "maybe"),
            (ENV_MAX_PAYLOAD_CHARS, "lots"),
            (ENV_MAX_PAYLOAD_CHARS, "-4"),
        ],
    )
    def test_invalid_env_falls_back(self, clean_env: pytest.MonkeyPatch, variable: str, value: str) -> None:
        clean_env.setenv(variable, value)
        assert _from_env() == Config()

    def test_invalid_env_logs_warning(self, clean_env: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
        clean_env.setenv(ENV_MAX_PAYLOAD_CHARS, "lots")
        with caplog.at_level(logging.WARNING, logger="klaw_outcome._config"):
            _from_env()
        assert any(record.name == "klaw_outcome._config" for record in caplog.records)


class TestInit:
    """Tests for init(), get_config() and reset()."""

    def test_get_config_reads_env_lazily(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(ENV_MAX_PAYLOAD_CHARS, "7")
        assert get_config().max_payload_chars == 7

    def test_get_config_is_cached(self, clean_env: pytest.MonkeyPatch) -> None:
        first = get_config()
        clean_env.setenv(ENV_MAX_PAYLOAD_CHARS, "9")
        assert get_config() is first

    def test_reset_rereads_env(self, clean_env: pytest.MonkeyPatch) -> None:
        get_config()
        clean_env.setenv(ENV_MAX_PAYLOAD_CHARS, "9")
        reset()
        assert get_config().max_payload_chars == 9

    def test_init_with_config(self, clean_env: pytest.MonkeyPatch) -> None:
        config = Config(max_payload_chars=10)
        assert init(config) is config
        assert get_config() is config

    def test_init_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        installed = init(Config(max_payload_chars=10), json_logs=False)
        assert installed == Config(max_payload_chars=10, json_logs=False)

    def test_init_rejects_negative_limit(self) -> None:
        with pytest.raises(ValueError, match="max_payload_chars"):
            init(max_payload_chars=-1)

    def test_init_rejects_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            init(log_level="LOUD")

    def test_init_configures_logging(self, clean_env: pytest.MonkeyPatch, restore_logging: None) -> None:
        init(log_level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_init_normalizes_level_case(self, clean_env: pytest.MonkeyPatch, restore_logging: None) -> None:
        installed = init(log_level="debug")
        assert installed.log_level == "DEBUG"
        assert get_config().log_level == "DEBUG"
        assert logging.getLogger().level == logging.DEBUG

    def test_init_normalizes_level_from_config(self, clean_env: pytest.MonkeyPatch, restore_logging: None) -> None:
        init(Config(log_level="warning"))
        assert get_config() == Config(log_level="WARNING")
