"""Request/response schemas for the reaction gateway."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecordReactionRequest(BaseModel):
    """Request to add one emoji reaction to a comment."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    comment_id: str | None = Field(default=None, alias="commentId")
    emoji: str | None = None

    @field_validator("comment_id", mode="before")
    @classmethod
    def stringify_comment_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class ReactionRecordedResponse(BaseModel):
    """Acknowledgement for a recorded reaction."""

    message: str = "Reaction recorded successfully"
