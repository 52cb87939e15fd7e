"""
Relational store for user rows.
"""

from .base_store import BaseUserStore
from .connection import DatabaseConnectionPool
from .memory_store import InMemoryUserStore
from .schema_mgmt import SchemaManager
from .user_store import PostgresUserStore

__all__ = [
    "BaseUserStore",
    "DatabaseConnectionPool",
    "InMemoryUserStore",
    "PostgresUserStore",
    "SchemaManager",
]
