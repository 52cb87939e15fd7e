"""
Core parsing, validation and routing logic for the CSV loader.
"""

from .config import Settings, load_settings
from .errors import ConfigurationError, CsvLoaderError, SourceReadError

__all__ = [
    "Settings",
    "load_settings",
    "CsvLoaderError",
    "ConfigurationError",
    "SourceReadError",
]
