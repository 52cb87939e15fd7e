"""
Runtime configuration for the CSV loader.

Settings come from environment variables, optionally seeded from a
``.env`` file. Variables already present in the environment win over
values in the file.
"""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigurationError

# Environment variable -> Settings field
ENV_FIELDS = {
    "CSV_FILE_PATH": "csv_file_path",
    "PG_HOST": "pg_host",
    "PG_PORT": "pg_port",
    "PG_DATABASE": "pg_database",
    "PG_USER": "pg_user",
    "PG_PASSWORD": "pg_password",
    "LOG_LEVEL": "log_level",
    "LOG_FORMAT": "log_format",
    "STRIP_ADDRESS_FROM_ADDITIONAL": "strip_address_from_additional",
}


class Settings(BaseModel):
    """
    Loader configuration.

    Attributes:
        csv_file_path: Source file to ingest (required by ``ingest``)
        pg_host: Database host
        pg_port: Database port
        pg_database: Target database name
        pg_user: Database user
        pg_password: Database password (required to connect)
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_format: "json" or "text"
        strip_address_from_additional: Drop the address subtree from additional_info
    """

    csv_file_path: str | None = None
    pg_host: str = "localhost"
    pg_port: int = Field(5432, ge=1, le=65535)
    pg_database: str = Field("users_db", min_length=1)
    pg_user: str = Field("postgres", min_length=1)
    pg_password: str | None = None
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"
    strip_address_from_additional: bool = False

    @field_validator("csv_file_path", "pg_password")
    @classmethod
    def blank_as_unset(cls, v):
        """Treat empty strings the same as an unset variable."""
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v):
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported log level: {v}")
        return level

    def require_csv_file_path(self) -> str:
        """
        Return the configured source path.

        Raises:
            ConfigurationError: If CSV_FILE_PATH is not set
        """
        if not self.csv_file_path:
            raise ConfigurationError("CSV_FILE_PATH is not set")
        return self.csv_file_path


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from the environment.

    Args:
        env_file: Optional path to a .env file. When omitted, a ``.env`` in the
            current directory is used if present.

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If an explicit env_file is missing or a value is invalid
    """
    if env_file is not None:
        env_path = Path(env_file)
        if not env_path.exists():
            raise ConfigurationError(f"Environment file not found: {env_file}")
        load_dotenv(env_path, override=False)
    elif (Path.cwd() / ".env").exists():
        load_dotenv(Path.cwd() / ".env", override=False)

    values = {
        field_name: os.environ[env_name]
        for env_name, field_name in ENV_FIELDS.items()
        if env_name in os.environ
    }

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
