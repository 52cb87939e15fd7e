"""
IngestionSummary model: the result of one ingestion run.
"""

from typing import Any, List

from pydantic import BaseModel, Field, field_validator

from .skip_reason import SkipReason


class IngestionSummary(BaseModel):
    """
    Outcome of one ingestion run (immutable once returned).

    Attributes:
        inserted_count: Rows written to the store
        skipped: Rows that failed validation or insertion, in document order
        total_rows: Parsed data records (inserted_count + len(skipped))
    """

    inserted_count: int = Field(0, ge=0)
    skipped: List[SkipReason] = Field(default_factory=list)
    total_rows: int = Field(0, ge=0)

    @field_validator("total_rows")
    @classmethod
    def check_row_accounting(cls, v, info):
        """Every parsed record is either inserted or skipped."""
        inserted = info.data.get("inserted_count")
        skipped = info.data.get("skipped")
        if inserted is not None and skipped is not None and inserted + len(skipped) != v:
            raise ValueError(
                f"inserted_count ({inserted}) + skipped ({len(skipped)}) "
                f"must equal total_rows ({v})"
            )
        return v

    @classmethod
    def empty(cls, total_rows: int = 0) -> "IngestionSummary":
        """Summary for a run that had nothing to process."""
        return cls(inserted_count=0, skipped=[], total_rows=total_rows)

    def to_response(self) -> dict[str, Any]:
        """Render the summary as the upload response body."""
        return {
            "message": "Upload completed",
            "inserted": self.inserted_count,
            "skipped": [
                {"lineIndex": s.line_index, "reason": s.reason} for s in self.skipped
            ],
            "totalRows": self.total_rows,
        }

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "inserted_count": 2,
                "skipped": [{"line_index": 2, "reason": "Invalid age: \"abc\""}],
                "total_rows": 3
            }
        }
