"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import DatabaseSettings, RegistrySettings, Settings


class TestDatabaseSettings:
    def test_defaults(self, monkeypatch):
        for name in ("HOST", "PORT", "DATABASE", "USERNAME"):
            monkeypatch.delenv(f"LAUNCHPAD_DB_{name}", raising=False)

        settings = DatabaseSettings(_env_file=None)

        assert settings.host == "localhost"
        assert settings.port == 5432
        assert settings.database == "launchpad"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("LAUNCHPAD_DB_HOST", "db.internal")
        monkeypatch.setenv("LAUNCHPAD_DB_PASSWORD", "hunter2")

        settings = DatabaseSettings(_env_file=None)

        assert settings.host == "db.internal"
        assert settings.password.get_secret_value() == "hunter2"

    def test_connection_string_hides_password(self):
        settings = DatabaseSettings(
            _env_file=None, host="db", username="app", database="launchpad"
        )

        assert settings.connection_string == "postgresql://app@db:5432/launchpad"

    def test_pool_max_below_min_is_rejected(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(
                _env_file=None, pool_min_connections=5, pool_max_connections=2
            )


class TestRegistrySettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LAUNCHPAD_REGISTRY_ASSIGN_BATCH_LIMIT", raising=False)
        monkeypatch.delenv("LAUNCHPAD_REGISTRY_WIDGET_LIMIT", raising=False)

        settings = RegistrySettings(_env_file=None)

        assert settings.assign_batch_limit == 20
        assert settings.widget_limit == 20

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("LAUNCHPAD_REGISTRY_WIDGET_LIMIT", "8")

        assert RegistrySettings(_env_file=None).widget_limit == 8

    def test_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            RegistrySettings(_env_file=None, assign_batch_limit=0)


def test_settings_app_name_default():
    assert Settings(_env_file=None).app_name == "Launchpad API"
