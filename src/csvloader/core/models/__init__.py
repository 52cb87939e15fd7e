"""
Data models for the CSV loader.

All models use Pydantic for runtime validation and type safety.
"""

from .ingestion_summary import IngestionSummary
from .parsed_document import ParsedDocument
from .skip_reason import SkipReason
from .user_row import UserRow
from .validated_row import ValidatedRow
from .write_result import WriteResult

__all__ = [
    "ParsedDocument",
    "ValidatedRow",
    "SkipReason",
    "IngestionSummary",
    "WriteResult",
    "UserRow",
]
