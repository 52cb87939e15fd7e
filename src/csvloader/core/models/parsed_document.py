"""
ParsedDocument model: the header and nested records produced from one CSV text.
"""

from typing import Any, List

from pydantic import BaseModel, Field


class ParsedDocument(BaseModel):
    """
    Result of parsing a whole CSV document (ephemeral).

    Attributes:
        header: Ordered dot-path keys taken from the first non-blank line
        records: One nested record per non-empty data line, in document order
    """

    header: List[str] = Field(default_factory=list)
    records: List[dict[str, Any]] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to ingest."""
        return not self.header or not self.records

    class Config:
        json_schema_extra = {
            "example": {
                "header": ["name.firstName", "name.lastName", "age", "address.city"],
                "records": [
                    {
                        "name": {"firstName": "Rohit", "lastName": "Prasad"},
                        "age": "35",
                        "address": {"city": "Pune"}
                    }
                ]
            }
        }
