"""
WriteResult model: outcome of a single store insertion.
"""

from pydantic import BaseModel, Field, field_validator


class WriteResult(BaseModel):
    """
    Success or failure of one row write.

    A failed write is an ordinary value so the ingestion loop can record it
    and move on to the next row.

    Attributes:
        ok: Whether the row was stored
        message: Failure message (required when ok is False)
    """

    ok: bool
    message: str | None = Field(None, validate_default=True)

    @field_validator("message")
    @classmethod
    def check_message_consistency(cls, v, info):
        """A failure must carry a message; a success must not."""
        ok = info.data.get("ok")
        if ok and v is not None:
            raise ValueError("ok=True but message is set")
        if ok is False and not v:
            raise ValueError("ok=False requires a message")
        return v

    @classmethod
    def succeeded(cls) -> "WriteResult":
        return cls(ok=True)

    @classmethod
    def failed(cls, message: str) -> "WriteResult":
        return cls(ok=False, message=message or "unknown error")

    class Config:
        frozen = True
