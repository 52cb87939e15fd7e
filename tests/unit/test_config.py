"""
Unit tests for settings loading.
"""

import pytest

from csvloader.core.config import Settings, load_settings
from csvloader.core.errors import ConfigurationError


@pytest.mark.unit
class TestLoadSettings:
    """Tests for load_settings"""

    def test_defaults(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        settings = load_settings()
        assert settings.csv_file_path is None
        assert settings.pg_host == "localhost"
        assert settings.pg_port == 5432
        assert settings.log_level == "INFO"
        assert settings.strip_address_from_additional is False

    def test_environment_variables(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        clean_env.setenv("CSV_FILE_PATH", "/data/users.csv")
        clean_env.setenv("PG_PORT", "6543")
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("STRIP_ADDRESS_FROM_ADDITIONAL", "true")

        settings = load_settings()

        assert settings.csv_file_path == "/data/users.csv"
        assert settings.pg_port == 6543
        assert settings.log_level == "DEBUG"
        assert settings.strip_address_from_additional is True

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / "loader.env"
        env_file.write_text("CSV_FILE_PATH=/data/from_file.csv\nPG_DATABASE=people\n")

        settings = load_settings(env_file)

        assert settings.csv_file_path == "/data/from_file.csv"
        assert settings.pg_database == "people"

    def test_environment_wins_over_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / "loader.env"
        env_file.write_text("PG_HOST=file-host\n")
        clean_env.setenv("PG_HOST", "env-host")

        assert load_settings(env_file).pg_host == "env-host"

    def test_missing_env_file(self, clean_env, tmp_path):
        with pytest.raises(ConfigurationError):
            load_settings(tmp_path / "absent.env")

    def test_invalid_port(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        clean_env.setenv("PG_PORT", "not-a-port")
        with pytest.raises(ConfigurationError):
            load_settings()

    def test_invalid_log_level(self, clean_env, tmp_path):
        clean_env.chdir(tmp_path)
        clean_env.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ConfigurationError):
            load_settings()


@pytest.mark.unit
class TestSettings:
    """Tests for Settings"""

    def test_blank_path_is_unset(self):
        assert Settings(csv_file_path="  ").csv_file_path is None

    def test_require_csv_file_path(self):
        with pytest.raises(ConfigurationError):
            Settings().require_csv_file_path()
        assert Settings(csv_file_path="a.csv").require_csv_file_path() == "a.csv"
