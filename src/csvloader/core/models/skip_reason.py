"""
SkipReason model: why one input row was not persisted.
"""

from pydantic import BaseModel, Field


class SkipReason(BaseModel):
    """
    A row that failed validation or store insertion.

    Attributes:
        line_index: 1-based ordinal of the record among parsed data rows
        reason: Human-readable explanation
    """

    line_index: int = Field(..., ge=1)
    reason: str = Field(..., min_length=1)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "line_index": 3,
                "reason": "Invalid age: \"abc\""
            }
        }
