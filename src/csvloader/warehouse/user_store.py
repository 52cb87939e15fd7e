"""
PostgreSQL-backed user store.

Rows go to the ``users`` table; address and additional info are stored
as JSONB.
"""

from typing import Any

import psycopg
from psycopg.types.json import Jsonb

from csvloader.core.models import UserRow, WriteResult
from csvloader.observability.logger import get_logger

from .base_store import BaseUserStore
from .connection import DatabaseConnectionPool

logger = get_logger(__name__)

INSERT_USER = """
    INSERT INTO users (name, age, address, additional_info)
    VALUES (%s, %s, %s, %s)
"""

SELECT_AGES = "SELECT age FROM users"

SELECT_USERS = """
    SELECT id, name, age, address, additional_info
    FROM users
    ORDER BY id
    LIMIT %s
"""


class PostgresUserStore(BaseUserStore):
    """
    User store writing one row per insert, each in its own transaction.
    """

    def __init__(self, pool: DatabaseConnectionPool):
        """
        Initialize store.

        Args:
            pool: Open database connection pool
        """
        self.pool = pool

    def insert_row(
        self,
        name: str,
        age: int,
        address: dict[str, Any],
        additional: dict[str, Any],
    ) -> WriteResult:
        try:
            self.pool.execute_command(
                INSERT_USER,
                (name, age, Jsonb(address), Jsonb(additional))
            )
        except (psycopg.Error, TypeError, ValueError) as e:
            logger.error(
                f"Failed to insert user row: {e}",
                extra={"user_name": name, "error_type": type(e).__name__}
            )
            return WriteResult.failed(str(e).strip())

        return WriteResult.succeeded()

    def read_all_ages(self) -> list[int]:
        rows = self.pool.execute_query(SELECT_AGES)
        return [row["age"] for row in rows]

    def list_users(self, limit: int = 100) -> list[UserRow]:
        rows = self.pool.execute_query(SELECT_USERS, (limit,))
        return [UserRow(**row) for row in rows]
