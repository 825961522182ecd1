"""Tests for settings and logging setup."""

import logging

from nack_auth.config import logging as logging_config
from nack_auth.config.settings import Settings, get_settings


def test_defaults():
    settings = Settings()

    assert settings.credential_backend == "local"
    assert settings.creds_cache_dir == "/nack-accounts/creds/"
    assert settings.nkey_cache_dir == "/nack-accounts/keys/"
    assert settings.cache_dir_mode == 0o666
    assert settings.cache_file_mode == 0o666
    assert settings.strict_source_prefix is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("creds_cache_dir", "/data/creds/")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.creds_cache_dir == "/data/creds/"
    assert settings.log_level == "debug"


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("NKEY_CACHE_DIR=/env/keys/\n")

    assert Settings().nkey_cache_dir == "/env/keys/"


def test_configure_logging_uses_settings_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setenv("LOG_LEVEL", "warning")

    logging_config.configure_logging()
    logging_config.configure_logging("debug")
    logging_config.configure_logging("nonsense")

    assert [c["level"] for c in calls] == [logging.WARNING, logging.DEBUG, logging.INFO]
    assert calls[0]["format"] == logging_config.LOG_FORMAT
