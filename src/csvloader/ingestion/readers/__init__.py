"""
Source readers for ingestion.
"""

from .file_reader import FileSystem, LocalFileSystem

__all__ = ["FileSystem", "LocalFileSystem"]
