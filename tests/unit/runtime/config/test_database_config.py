"""Unit tests for DatabaseConfig password and URL handling."""

import pytest

from src.employee_api.runtime.config.config_data import DatabaseConfig

POSTGRES_URL = "postgresql://employees:urlpass@db:5432/employees"


class TestDatabaseConfigBackend:
    def test_default_is_file_sqlite(self):
        config = DatabaseConfig()

        assert config.is_sqlite
        assert not config.is_memory

    @pytest.mark.parametrize("url", ["sqlite:///:memory:", "sqlite://"])
    def test_memory_sqlite(self, url):
        assert DatabaseConfig(url=url).is_memory

    def test_postgres_is_not_sqlite(self):
        config = DatabaseConfig(url=POSTGRES_URL)

        assert not config.is_sqlite
        assert not config.is_memory


class TestDatabaseConfigPassword:
    def test_sqlite_has_no_password(self):
        config = DatabaseConfig(url="sqlite:///./employees.db")

        assert config.password is None
        assert config.connection_string == "sqlite:///./employees.db"

    @pytest.mark.parametrize("mode", ["development", "test"])
    def test_non_production_reads_password_from_url(self, mode):
        config = DatabaseConfig(url=POSTGRES_URL, environment_mode=mode)

        assert config.password == "urlpass"
        assert config.connection_string == POSTGRES_URL

    def test_production_reads_password_file(self, tmp_path):
        secret = tmp_path / "db_password"
        secret.write_text("filepass\n")
        config = DatabaseConfig(
            url="postgresql://employees@db:5432/employees",
            environment_mode="production",
            password_file=str(secret),
        )

        assert config.password == "filepass"
        assert (
            config.connection_string
            == "postgresql://employees:filepass@db:5432/employees"
        )

    def test_production_reads_password_env_var(self, monkeypatch):
        monkeypatch.setenv("EMPLOYEE_DB_PASSWORD", "envpass")
        config = DatabaseConfig(
            url="postgresql://employees@db:5432/employees",
            environment_mode="production",
            password_env_var="EMPLOYEE_DB_PASSWORD",
        )

        assert config.password == "envpass"

    def test_production_file_wins_over_env_var(self, tmp_path, monkeypatch):
        secret = tmp_path / "db_password"
        secret.write_text("filepass")
        monkeypatch.setenv("EMPLOYEE_DB_PASSWORD", "envpass")
        config = DatabaseConfig(
            url=POSTGRES_URL,
            environment_mode="production",
            password_file=str(secret),
            password_env_var="EMPLOYEE_DB_PASSWORD",
        )

        assert config.password == "filepass"

    def test_production_missing_env_var_raises(self, monkeypatch):
        monkeypatch.delenv("EMPLOYEE_DB_PASSWORD", raising=False)
        config = DatabaseConfig(
            url=POSTGRES_URL,
            environment_mode="production",
            password_env_var="EMPLOYEE_DB_PASSWORD",
        )

        with pytest.raises(ValueError, match="EMPLOYEE_DB_PASSWORD not set"):
            _ = config.password

    def test_production_unreadable_file_raises(self, tmp_path):
        config = DatabaseConfig(
            url=POSTGRES_URL,
            environment_mode="production",
            password_file=str(tmp_path / "missing"),
        )

        with pytest.raises(ValueError, match="Failed to read database password"):
            _ = config.password

    def test_production_without_source_raises(self):
        config = DatabaseConfig(url=POSTGRES_URL, environment_mode="production")

        with pytest.raises(ValueError, match="password_file or password_env_var"):
            _ = config.connection_string
