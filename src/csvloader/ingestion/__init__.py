"""
CSV ingestion: source readers and the load pipeline.
"""

from .pipeline import IngestionPipeline, run_ingestion
from .readers import FileSystem, LocalFileSystem

__all__ = [
    "IngestionPipeline",
    "run_ingestion",
    "FileSystem",
    "LocalFileSystem",
]
