"""
Prometheus metrics collection for the CSV loader

Counts ingested rows by outcome, times ingestion runs and exposes the
latest age distribution as a gauge.
"""
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

from csvloader.core.models import IngestionSummary

# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# INGESTION METRICS
# =======================

rows_processed_total = Counter(
    name="csvloader_rows_processed_total",
    documentation="Total number of parsed rows by outcome",
    labelnames=["status"],  # status: inserted, invalid, store_error
    registry=REGISTRY,
)

ingestion_runs_total = Counter(
    name="csvloader_ingestion_runs_total",
    documentation="Total number of ingestion runs by outcome",
    labelnames=["outcome"],  # outcome: completed, source_missing, empty
    registry=REGISTRY,
)

ingestion_duration_seconds = Histogram(
    name="csvloader_ingestion_duration_seconds",
    documentation="Time spent in one ingestion run in seconds",
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
    registry=REGISTRY,
)

# =======================
# REPORTING METRICS
# =======================

age_distribution_percent = Gauge(
    name="csvloader_age_distribution_percent",
    documentation="Share of stored users per age bucket, in percent",
    labelnames=["bucket"],
    registry=REGISTRY,
)


# =======================
# HELPERS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def classify_skip(reason: str) -> str:
    """Map a skip reason to a row status label."""
    if reason.startswith("DB insert error"):
        return "store_error"
    return "invalid"


def record_ingestion_run(
    summary: IngestionSummary,
    duration_seconds: float,
    outcome: str = "completed",
) -> None:
    """
    Record the metrics of one ingestion run.

    Args:
        summary: Summary returned by the run
        duration_seconds: Wall-clock duration of the run
        outcome: completed, source_missing or empty
    """
    rows_processed_total.labels(status="inserted").inc(summary.inserted_count)
    for skip in summary.skipped:
        rows_processed_total.labels(status=classify_skip(skip.reason)).inc()

    ingestion_runs_total.labels(outcome=outcome).inc()
    ingestion_duration_seconds.observe(duration_seconds)


def record_age_distribution(percents: dict[str, int]) -> None:
    """
    Publish the latest age distribution.

    Args:
        percents: Bucket label -> percentage
    """
    for bucket, percent in percents.items():
        age_distribution_percent.labels(bucket=bucket).set(percent)
