"""Comment board entities as exchanged with the upstream comment service.

The upstream owns storage. These models only describe its JSON shape:

- Comment: top-level message with emoji reaction tallies and replies
- Reply: message attached to exactly one parent comment

Timestamps are epoch milliseconds. Unknown upstream fields are ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


# Reaction buttons shown under each comment, in display order
REACTION_EMOJIS: tuple[str, ...] = ("😡", "💀", "🤬", "🔥", "💩")


def _coerce_id(value: Any) -> Any:
    # Upstream database ids may arrive as JSON numbers
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class Reply(BaseModel):
    """A reply attached to a parent comment."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    message: str
    timestamp: int
    parent_comment_id: str | None = Field(default=None, alias="parentCommentId")

    @field_validator("id", "parent_comment_id", mode="before")
    @classmethod
    def normalize_ids(cls, v: Any) -> Any:
        return _coerce_id(v)


class Comment(BaseModel):
    """A top-level comment with its reactions and replies."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    message: str
    timestamp: int
    reactions: dict[str, int] = Field(default_factory=dict)
    replies: list[Reply] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, v: Any) -> Any:
        return _coerce_id(v)

    @field_validator("reactions", "replies", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat an explicit JSON null as an empty collection."""
        if v is None:
            return {} if info.field_name == "reactions" else []
        return v

    def reaction_count(self, emoji: str) -> int:
        """Return the tally for ``emoji`` (absent means zero)."""
        return self.reactions.get(emoji, 0)
