"""
Filesystem access for ingestion sources.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from csvloader.core.errors import SourceReadError


class FileSystem(ABC):
    """
    Minimal filesystem interface needed by the ingestion pipeline.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if ``path`` exists."""
        pass

    @abstractmethod
    def read_all_text(self, path: str) -> str:
        """
        Read a whole file as text.

        Raises:
            SourceReadError: If the file cannot be read
        """
        pass


class LocalFileSystem(FileSystem):
    """
    Reads files from the local disk as UTF-8 (a leading BOM is dropped).
    """

    def __init__(self, encoding: str = "utf-8-sig"):
        """
        Initialize reader.

        Args:
            encoding: Text encoding of source files
        """
        self.encoding = encoding

    def exists(self, path: str) -> bool:
        return Path(path).expanduser().exists()

    def read_all_text(self, path: str) -> str:
        source_path = Path(path).expanduser()
        if source_path.is_dir():
            raise SourceReadError(str(path), "path is a directory")
        try:
            return source_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(str(path), str(e)) from e
