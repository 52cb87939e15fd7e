"""
In-memory user store, used for dry runs.
"""

import copy
import json
from typing import Any

from csvloader.core.models import UserRow, WriteResult

from .base_store import BaseUserStore

# Bounds of the PostgreSQL INT column
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

NUL = "\x00"


def contains_nul(value: Any) -> bool:
    """True if any string or key in a JSON-like value holds a NUL character."""
    if isinstance(value, str):
        return NUL in value
    if isinstance(value, dict):
        return any(contains_nul(k) or contains_nul(v) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return any(contains_nul(item) for item in value)
    return False


class InMemoryUserStore(BaseUserStore):
    """
    Keeps rows in a list and applies the same constraints as the users table:
    non-empty name, age within INT range, JSON-serializable payloads and
    no NUL characters in text or JSONB values.
    """

    def __init__(self):
        self.rows: list[UserRow] = []
        self._next_id = 1

    def insert_row(
        self,
        name: str,
        age: int,
        address: dict[str, Any],
        additional: dict[str, Any],
    ) -> WriteResult:
        if not name:
            return WriteResult.failed('null value in column "name" violates not-null constraint')
        if not INT_MIN <= age <= INT_MAX:
            return WriteResult.failed("integer out of range")
        if NUL in name:
            return WriteResult.failed("PostgreSQL text fields cannot contain NUL (0x00) bytes")
        try:
            json.dumps(address)
            json.dumps(additional)
        except (TypeError, ValueError) as e:
            return WriteResult.failed(str(e))
        if contains_nul(address) or contains_nul(additional):
            return WriteResult.failed("unsupported Unicode escape sequence")

        self.rows.append(
            UserRow(
                id=self._next_id,
                name=name,
                age=age,
                address=copy.deepcopy(address),
                additional_info=copy.deepcopy(additional),
            )
        )
        self._next_id += 1
        return WriteResult.succeeded()

    def read_all_ages(self) -> list[int]:
        return [row.age for row in self.rows]

    def list_users(self, limit: int = 100) -> list[UserRow]:
        return self.rows[:limit]
