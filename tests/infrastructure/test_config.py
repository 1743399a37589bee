"""Settings loading from the environment."""

from ecom.infrastructure.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("ECOM_DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite:///ecom.db"
    assert settings.echo_sql is False
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ECOM_DATABASE_URL", "sqlite:///orders.db")
    monkeypatch.setenv("ECOM_ECHO_SQL", "true")
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite:///orders.db"
    assert settings.echo_sql is True
