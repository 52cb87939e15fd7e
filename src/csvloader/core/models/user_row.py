"""
UserRow model: one persisted row of the users table.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class UserRow(BaseModel):
    """
    Row shape of the ``users`` table.

    Attributes:
        id: Serial primary key
        name: Full name
        age: Age in years
        address: Nested address mapping (JSONB)
        additional_info: Remaining fields of the source row (JSONB)
    """

    id: int | None = None
    name: str = Field(..., min_length=1)
    age: int
    address: Dict[str, Any] | None = None
    additional_info: Dict[str, Any] | None = None

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Rohit Prasad",
                "age": 35,
                "address": {"city": "Pune", "state": "Maharashtra"},
                "additional_info": {"gender": "male"}
            }
        }
