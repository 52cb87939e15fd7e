"""
Command-line interface for the CSV loader.

Usage:
    csvloader ingest [--input <file_path>] [--dry-run] [--env-file <path>]
    csvloader report [--env-file <path>]
    csvloader users [--limit N] [--env-file <path>]
    csvloader init-db [--env-file <path>]
"""

import argparse
import json
import sys

from csvloader.core.config import Settings, load_settings
from csvloader.core.errors import CsvLoaderError
from csvloader.ingestion import LocalFileSystem, run_ingestion
from csvloader.observability.logger import get_logger, setup_logger
from csvloader.reporting import AgeDistributionReporter
from csvloader.warehouse import (
    DatabaseConnectionPool,
    InMemoryUserStore,
    PostgresUserStore,
    SchemaManager,
)

logger = get_logger(__name__)


def ingest_command(args, settings: Settings) -> int:
    """
    Load the configured CSV file and print the summary and age distribution.

    Args:
        args: Command-line arguments
        settings: Loaded settings

    Returns:
        Process exit code
    """
    if args.input:
        settings = settings.model_copy(update={"csv_file_path": args.input})
    settings.require_csv_file_path()

    if args.dry_run:
        logger.info("DRY RUN MODE: rows are validated into an in-memory store")
        store = InMemoryUserStore()
        summary = run_ingestion(LocalFileSystem(), store, settings)
        print(json.dumps(summary.to_response(), indent=2, ensure_ascii=False))
        print(AgeDistributionReporter(store).render())
        return 0

    pool = DatabaseConnectionPool.from_settings(settings)
    try:
        SchemaManager(pool).initialize()
        store = PostgresUserStore(pool)
        summary = run_ingestion(LocalFileSystem(), store, settings)
        print(json.dumps(summary.to_response(), indent=2, ensure_ascii=False))
        print(AgeDistributionReporter(store).render())
    finally:
        pool.close()
    return 0


def report_command(args, settings: Settings) -> int:
    """Print the age distribution of stored users."""
    with DatabaseConnectionPool.from_settings(settings) as pool:
        print(AgeDistributionReporter(PostgresUserStore(pool)).render())
    return 0


def users_command(args, settings: Settings) -> int:
    """Print stored users as JSON."""
    with DatabaseConnectionPool.from_settings(settings) as pool:
        rows = PostgresUserStore(pool).list_users(limit=args.limit)
    payload = {"count": len(rows), "rows": [row.model_dump() for row in rows]}
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


def init_db_command(args, settings: Settings) -> int:
    """Create the database and users table if needed."""
    pool = DatabaseConnectionPool.from_settings(settings)
    try:
        SchemaManager(pool).initialize()
    finally:
        pool.close()
    return 0


COMMANDS = {
    "ingest": ingest_command,
    "report": report_command,
    "users": users_command,
    "init-db": init_db_command,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="csvloader",
        description="Load nested CSV user files into PostgreSQL",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Load the file named by CSV_FILE_PATH
  csvloader ingest

  # Load a specific file, validating only
  csvloader ingest --input data/users.csv --dry-run

  # Print the age distribution
  csvloader report

  # Show the first 20 stored users
  csvloader users --limit 20
        """
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to a .env file (default: ./.env if present)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    ingest_parser = subparsers.add_parser("ingest", help="Load a CSV file")
    ingest_parser.add_argument(
        "--input",
        default=None,
        help="Path to input file (overrides CSV_FILE_PATH)"
    )
    ingest_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate rows without writing to the database"
    )

    subparsers.add_parser("report", help="Print the age-group distribution")

    users_parser = subparsers.add_parser("users", help="List stored users")
    users_parser.add_argument(
        "--limit",
        type=int,
        default=100,
        help="Maximum number of users to print (default: 100)"
    )

    subparsers.add_parser("init-db", help="Create database and users table if missing")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        settings = load_settings(args.env_file)
        setup_logger("csvloader", level=settings.log_level, format_type=settings.log_format)
        return COMMANDS[args.command](args, settings)
    except CsvLoaderError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    except Exception as e:
        logger.error(f"Error during {args.command}: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
