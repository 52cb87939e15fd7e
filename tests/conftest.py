"""
Pytest configuration and fixtures for csvloader tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import os
from typing import Generator

import pytest

from csvloader.core.models import UserRow, WriteResult
from csvloader.warehouse import BaseUserStore, InMemoryUserStore


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that require Docker containers"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that test the full pipeline"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take more than 5 seconds to run"
    )


# =======================
# STORE FIXTURES
# =======================

class FlakyUserStore(BaseUserStore):
    """
    In-memory store that rejects inserts for selected names.
    """

    def __init__(self, failing_names: dict[str, str] | None = None):
        self.inner = InMemoryUserStore()
        self.failing_names = failing_names or {}
        self.calls: list[tuple] = []

    def insert_row(self, name, age, address, additional) -> WriteResult:
        self.calls.append((name, age, address, additional))
        if name in self.failing_names:
            return WriteResult.failed(self.failing_names[name])
        return self.inner.insert_row(name, age, address, additional)

    def read_all_ages(self) -> list[int]:
        return self.inner.read_all_ages()

    def list_users(self, limit: int = 100) -> list[UserRow]:
        return self.inner.list_users(limit)


@pytest.fixture
def memory_store() -> InMemoryUserStore:
    """Empty in-memory user store"""
    return InMemoryUserStore()


@pytest.fixture
def flaky_store_factory():
    """Build a store that fails inserts for the given names"""
    return FlakyUserStore


# =======================
# DATABASE FIXTURES (Testcontainers)
# =======================

@pytest.fixture(scope="session")
def postgres_container():
    """
    Start PostgreSQL container for integration tests

    Skips dependent tests when Docker is not available.

    Yields:
        PostgresContainer instance
    """
    from testcontainers.postgres import PostgresContainer

    container = PostgresContainer(
        image="postgres:16.2-alpine",
        username="test_loader",
        password="test_password",
        dbname="test_users",
    )
    try:
        container.start()
    except Exception as e:
        pytest.skip(f"Docker not available for PostgreSQL container: {e}")

    try:
        yield container
    finally:
        container.stop()


@pytest.fixture(scope="session")
def db_settings(postgres_container):
    """Settings pointing at the test container"""
    from csvloader.core.config import Settings

    return Settings(
        pg_host=postgres_container.get_container_host_ip(),
        pg_port=int(postgres_container.get_exposed_port(5432)),
        pg_database="test_users",
        pg_user="test_loader",
        pg_password="test_password",
    )


@pytest.fixture(scope="function")
def db_pool(db_settings) -> Generator:
    """
    Open pool on a database with an empty users table

    Yields:
        DatabaseConnectionPool
    """
    from csvloader.warehouse import DatabaseConnectionPool, SchemaManager

    pool = DatabaseConnectionPool.from_settings(db_settings)
    SchemaManager(pool).initialize()
    pool.execute_command("TRUNCATE TABLE users RESTART IDENTITY")
    try:
        yield pool
    finally:
        pool.close()


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temporary file and return its path"""
    def _write(text: str, name: str = "users.csv") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def clean_env(monkeypatch):
    """Remove loader environment variables for the duration of a test"""
    from csvloader.core.config import ENV_FIELDS

    for name in ENV_FIELDS:
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
