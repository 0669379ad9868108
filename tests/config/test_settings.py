"""Tests for dice_duel/config/settings.py — environment-driven settings."""

import logging

import pytest
from pydantic import ValidationError

from dice_duel.config.settings import Settings, configure_logging, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DEFAULT_TARGET_SCORE", "RNG_SEED", "STRICT_ACTIONS", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.default_target_score == 101
        assert settings.rng_seed is None
        assert settings.strict_actions is False
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_TARGET_SCORE", "250")
        monkeypatch.setenv("RNG_SEED", "17")
        monkeypatch.setenv("STRICT_ACTIONS", "true")
        settings = Settings(_env_file=None)

        assert settings.default_target_score == 250
        assert settings.rng_seed == 17
        assert settings.strict_actions is True

    def test_low_target_rejected(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_TARGET_SCORE", "5")
        with pytest.raises(ValidationError, match="Target score must be at least 10"):
            Settings(_env_file=None)

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(_env_file=None, log_level="chatty")


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_debug_forces_debug_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        configure_logging(Settings(_env_file=None, debug=True))
        assert calls["level"] == logging.DEBUG

    def test_uses_log_level(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        configure_logging(Settings(_env_file=None, log_level="WARNING"))
        assert calls["level"] == "WARNING"
