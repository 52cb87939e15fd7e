"""
Exception hierarchy for the CSV loader.

Only configuration and source-read failures abort an ingestion run.
Row-level problems never surface as exceptions to callers; they are
recorded as skip reasons in the ingestion summary.
"""


class CsvLoaderError(Exception):
    """Base exception for all loader failures."""


class ConfigurationError(CsvLoaderError):
    """Raised when required runtime configuration is missing or invalid."""


class SourceReadError(CsvLoaderError):
    """Raised when the source file exists but cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read source file {path}: {reason}")
