"""
Observability: structured logging and Prometheus metrics.
"""

from .logger import get_logger, log_operation, setup_logger
from .metrics import generate_metrics, record_age_distribution, record_ingestion_run

__all__ = [
    "get_logger",
    "setup_logger",
    "log_operation",
    "generate_metrics",
    "record_ingestion_run",
    "record_age_distribution",
]
