"""Request/response schemas for the comment gateway.

Field presence and emptiness are checked by the gateway service, not here,
so a blank name or message is reported with the board's own 400 message
rather than a schema error.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateCommentRequest(BaseModel):
    """Request to create a top-level comment or, with ``parentId``, a reply."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    message: str | None = None
    parent_id: str | None = Field(default=None, alias="parentId")

    @field_validator("name", "message", mode="before")
    @classmethod
    def non_string_as_missing(cls, v: Any) -> Any:
        # Left to the gateway, which reports it as a missing field
        return v if isinstance(v, str) else None

    @field_validator("parent_id", mode="before")
    @classmethod
    def stringify_parent_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class ErrorResponse(BaseModel):
    """Error body returned for every failed gateway call."""

    error: str
