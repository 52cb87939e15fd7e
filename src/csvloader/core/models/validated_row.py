"""
ValidatedRow model: a record that passed validation, split into destination columns.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class ValidatedRow(BaseModel):
    """
    A record routed to its destination columns (ephemeral, never persisted as-is).

    Attributes:
        name: "<firstName> <lastName>"
        age: Parsed integer age
        address: The record's address subtree, or {} when absent or not nested
        additional: Remaining top-level fields of the record
    """

    name: str = Field(..., min_length=1)
    age: int
    address: Dict[str, Any] = Field(default_factory=dict)
    additional: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Rohit Prasad",
                "age": 35,
                "address": {"line1": "A-563 Rakshak Society", "city": "Pune"},
                "additional": {"gender": "male"}
            }
        }
