import logging

import pytest

from jobboard.core.config import ConfigError, Settings


def test_prod_requires_secret(monkeypatch):
    monkeypatch.setenv("JOBBOARD_ENV", "prod")
    monkeypatch.delenv("JOBBOARD_SECRET_KEY", raising=False)
    with pytest.raises(ConfigError):
        Settings.from_env()


def test_dev_falls_back_with_warning(monkeypatch, caplog):
    monkeypatch.setenv("JOBBOARD_ENV", "dev")
    monkeypatch.delenv("JOBBOARD_SECRET_KEY", raising=False)
    with caplog.at_level(logging.WARNING, logger="jobboard.config"):
        s = Settings.from_env()
    assert s.secret_key
    assert any("insecure" in r.message.lower() for r in caplog.records)


def test_test_env_defaults(monkeypatch):
    monkeypatch.setenv("JOBBOARD_ENV", "test")
    monkeypatch.setenv("JOBBOARD_SECRET_KEY", "abc")
    monkeypatch.delenv("JOBBOARD_DATABASE_PATH", raising=False)
    monkeypatch.delenv("JOBBOARD_BCRYPT_WORK_FACTOR", raising=False)
    s = Settings.from_env()
    assert s.database_path == "jobboard_test.sqlite3"
    assert s.bcrypt_work_factor == 4


def test_bad_numbers_rejected(monkeypatch):
    monkeypatch.setenv("JOBBOARD_SECRET_KEY", "abc")
    monkeypatch.setenv("JOBBOARD_BCRYPT_WORK_FACTOR", "lots")
    with pytest.raises(ConfigError):
        Settings.from_env()
    monkeypatch.setenv("JOBBOARD_BCRYPT_WORK_FACTOR", "2")
    with pytest.raises(ConfigError):
        Settings.from_env()


def test_cors_origins_split(monkeypatch):
    monkeypatch.setenv("JOBBOARD_SECRET_KEY", "abc")
    monkeypatch.setenv("JOBBOARD_CORS_ORIGINS", "http://a.test, http://b.test")
    assert Settings.from_env().cors_origins == ["http://a.test", "http://b.test"]
