"""
Store interface used by ingestion and reporting.
"""

from abc import ABC, abstractmethod
from typing import Any

from csvloader.core.models import UserRow, WriteResult


class BaseUserStore(ABC):
    """
    Abstract store for user rows.

    Implementations must report insertion failures through the returned
    WriteResult instead of raising, so one bad row never aborts a run.
    """

    @abstractmethod
    def insert_row(
        self,
        name: str,
        age: int,
        address: dict[str, Any],
        additional: dict[str, Any],
    ) -> WriteResult:
        """
        Insert one user row.

        Args:
            name: Full name
            age: Age in years
            address: Nested address mapping
            additional: Remaining fields of the source row

        Returns:
            WriteResult describing success or failure
        """
        pass

    @abstractmethod
    def read_all_ages(self) -> list[int]:
        """Return the age of every stored user."""
        pass

    @abstractmethod
    def list_users(self, limit: int = 100) -> list[UserRow]:
        """Return up to ``limit`` stored users ordered by id."""
        pass
