"""Comment gateway.

Validates comment and reply submissions and forwards them, together with
comment listing, to the upstream comment service. Holds no state between
requests.
"""

from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from ponhub.core.errors import UpstreamError, ValidationError
from ponhub.core.upstream import UpstreamClient

from .models import Comment, Reply


logger = structlog.get_logger(__name__)


COMMENTS_PATH = "/comments"


class CommentValidationError(ValidationError):
    """Name or message missing or blank."""

    def __init__(self, message: str = "Name and message are required"):
        super().__init__(message)


def clean_text(value: str | None) -> str:
    """Return ``value`` trimmed, or an empty string when missing."""
    if not isinstance(value, str):
        return ""
    return value.strip()


class CommentGateway:
    """Validation and forwarding for comments and replies."""

    def __init__(self, upstream: UpstreamClient):
        self.upstream = upstream

    async def list_comments(self) -> list[Comment]:
        """Fetch all comments in the order the upstream returns them."""
        data = await self.upstream.get_json(COMMENTS_PATH)
        # An empty board is encoded as null
        if data is None:
            data = []
        if not isinstance(data, list):
            logger.error(
                "upstream_unexpected_payload",
                path=COMMENTS_PATH,
                payload_type=type(data).__name__,
            )
            msg = "GET /comments did not return a list"
            raise UpstreamError(msg)

        comments = [self._parse(Comment, item) for item in data]
        logger.debug("comments_listed", count=len(comments))
        return comments

    async def create_comment(
        self,
        name: str | None,
        message: str | None,
        parent_id: str | None = None,
    ) -> Comment | Reply:
        """Create a top-level comment, or a reply when ``parent_id`` is set.

        Raises:
            CommentValidationError: name or message is blank. No upstream
                call is made.
            UpstreamError: the upstream call failed.
        """
        name = clean_text(name)
        message = clean_text(message)
        if not name or not message:
            raise CommentValidationError

        if parent_id:
            payload: dict[str, Any] = {
                "name": name,
                "message": message,
                "parentId": parent_id,
            }
            data = await self.upstream.post_json(COMMENTS_PATH, payload)
            reply = self._parse(Reply, data)
            logger.info("reply_created", reply_id=reply.id, parent_id=parent_id)
            return reply

        data = await self.upstream.post_json(
            COMMENTS_PATH, {"name": name, "message": message}
        )
        comment = self._parse(Comment, data)
        logger.info("comment_created", comment_id=comment.id)
        return comment

    def _parse(self, model: type[Comment] | type[Reply], data: Any) -> Any:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            logger.error(
                "upstream_unexpected_payload",
                path=COMMENTS_PATH,
                model=model.__name__,
                errors=e.errors(include_url=False),
            )
            msg = f"upstream returned an invalid {model.__name__}"
            raise UpstreamError(msg) from e
