"""
Schema bootstrap for the users table.

Creates the target database when it is missing and the ``users`` table
when it does not exist yet. This is not a migration tool: an existing
table is left untouched.
"""

import psycopg
from psycopg import sql

from csvloader.observability.logger import get_logger

from .connection import DatabaseConnectionPool

logger = get_logger(__name__)

ADMIN_DATABASE = "postgres"

CREATE_USERS_TABLE = """
    CREATE TABLE IF NOT EXISTS public.users (
        id SERIAL PRIMARY KEY,
        name VARCHAR NOT NULL,
        age INT NOT NULL,
        address JSONB,
        additional_info JSONB
    )
"""


class SchemaManager:
    """
    Ensures the database and the users table exist.
    """

    def __init__(self, pool: DatabaseConnectionPool):
        """
        Initialize schema manager.

        Args:
            pool: Connection pool for the target database (may still be closed)
        """
        self.pool = pool

    def ensure_database(self) -> bool:
        """
        Create the target database if it does not exist.

        Connects to the ``postgres`` maintenance database; the configured
        user needs CREATE DATABASE permission when the database is missing.

        Returns:
            True if the database was created, False if it already existed
        """
        dbname = self.pool.database
        admin_conninfo = self.pool.build_conninfo(ADMIN_DATABASE)

        with psycopg.connect(admin_conninfo, autocommit=True) as conn:
            exists = conn.execute(
                "SELECT 1 FROM pg_database WHERE datname = %s", (dbname,)
            ).fetchone()
            if exists:
                logger.info(f"Database {dbname} already exists")
                return False

            logger.info(f"Creating database {dbname}")
            conn.execute(sql.SQL("CREATE DATABASE {}").format(sql.Identifier(dbname)))
            return True

    def ensure_users_table(self) -> None:
        """Create the users table if it does not exist."""
        self.pool.execute_command(CREATE_USERS_TABLE)
        logger.info("users table ready")

    def initialize(self) -> None:
        """Ensure database and table, opening the pool if needed."""
        self.ensure_database()
        if not self.pool.is_open:
            self.pool.open()
        self.ensure_users_table()
