"""
CSV ingestion pipeline orchestration.

Coordinates the flow: read → parse → validate/route → insert → summarize
"""

import time

from csvloader.core.config import Settings
from csvloader.core.errors import ConfigurationError
from csvloader.core.models import IngestionSummary, SkipReason, ValidatedRow, WriteResult
from csvloader.core.parsing import CsvDocumentParser
from csvloader.core.routing import RowRouter
from csvloader.ingestion.readers import FileSystem
from csvloader.observability.logger import get_logger, log_operation
from csvloader.observability.metrics import record_ingestion_run
from csvloader.warehouse.base_store import BaseUserStore

logger = get_logger(__name__)


class IngestionPipeline:
    """
    Loads one CSV file into the user store.

    Flow:
    1. Check the configured source path
    2. Read the whole file and parse it into nested records
    3. Validate and route each record
    4. Insert valid rows one at a time, in document order
    5. Collect skipped rows with their reasons

    A failing row, whether invalid or rejected by the store, is recorded
    and the run continues with the next row.
    """

    def __init__(
        self,
        file_system: FileSystem,
        store: BaseUserStore,
        file_path: str | None,
        router: RowRouter | None = None,
        parser: CsvDocumentParser | None = None,
    ):
        """
        Initialize ingestion pipeline.

        Args:
            file_system: Source file access
            store: Destination store
            file_path: Path of the CSV file to load
            router: Row validator/router (default settings if None)
            parser: CSV document parser
        """
        self.file_system = file_system
        self.store = store
        self.file_path = file_path
        self.router = router or RowRouter()
        self.parser = parser or CsvDocumentParser()

    def run(self) -> IngestionSummary:
        """
        Run one ingestion.

        Returns:
            IngestionSummary with inserted count, skipped rows and total rows

        Raises:
            ConfigurationError: If no source path is configured
            SourceReadError: If the source file exists but cannot be read
        """
        if not self.file_path:
            raise ConfigurationError("CSV_FILE_PATH is not set")

        started = time.perf_counter()

        if not self.file_system.exists(self.file_path):
            logger.warning(
                f"CSV file not found at {self.file_path}",
                extra={"file_path": self.file_path}
            )
            summary = IngestionSummary.empty()
            record_ingestion_run(summary, time.perf_counter() - started, outcome="source_missing")
            return summary

        with log_operation("CSV ingestion", logger=logger, file_path=self.file_path):
            text = self.file_system.read_all_text(self.file_path)
            document = self.parser.parse(text)

            if document.is_empty:
                logger.info("CSV appears empty (no header or no data rows). Nothing to upload.")
                summary = IngestionSummary.empty(total_rows=len(document.records))
                record_ingestion_run(summary, time.perf_counter() - started, outcome="empty")
                return summary

            summary = self._load_records(document.records)

        logger.info(
            f"Inserted {summary.inserted_count} rows. Skipped {len(summary.skipped)} rows.",
            extra={
                "inserted_count": summary.inserted_count,
                "skipped_count": len(summary.skipped),
                "total_rows": summary.total_rows,
            }
        )
        record_ingestion_run(summary, time.perf_counter() - started)
        return summary

    def _load_records(self, records: list[dict]) -> IngestionSummary:
        """
        Route and insert records in order.

        Args:
            records: Parsed records

        Returns:
            IngestionSummary for these records
        """
        inserted_count = 0
        skipped: list[SkipReason] = []

        for ordinal, record in enumerate(records, start=1):
            routed = self.router.route(record, ordinal)

            if isinstance(routed, SkipReason):
                logger.warning(
                    f"Skipping row {ordinal}: {routed.reason}",
                    extra={"line_index": ordinal}
                )
                skipped.append(routed)
                continue

            outcome = self._insert(routed)
            if outcome.ok:
                inserted_count += 1
            else:
                logger.error(
                    f"DB error inserting row {ordinal}: {outcome.message}",
                    extra={"line_index": ordinal}
                )
                skipped.append(
                    SkipReason(line_index=ordinal, reason=f"DB insert error: {outcome.message}")
                )

        return IngestionSummary(
            inserted_count=inserted_count,
            skipped=skipped,
            total_rows=len(records),
        )

    def _insert(self, row: ValidatedRow) -> WriteResult:
        return self.store.insert_row(row.name, row.age, row.address, row.additional)


def run_ingestion(
    file_system: FileSystem,
    store: BaseUserStore,
    settings: Settings,
) -> IngestionSummary:
    """
    Run an ingestion configured from settings.

    Args:
        file_system: Source file access
        store: Destination store
        settings: Loaded settings (CSV_FILE_PATH, STRIP_ADDRESS_FROM_ADDITIONAL)

    Returns:
        IngestionSummary

    Raises:
        ConfigurationError: If CSV_FILE_PATH is not set
    """
    pipeline = IngestionPipeline(
        file_system=file_system,
        store=store,
        file_path=settings.require_csv_file_path(),
        router=RowRouter(
            strip_address_from_additional=settings.strip_address_from_additional
        ),
    )
    return pipeline.run()
