"""Reaction gateway.

Validates reaction requests and forwards them to the upstream comment
service as an increment-by-one of the (comment, emoji) tally.
"""

import structlog

from ponhub.core.errors import UpstreamError, ValidationError
from ponhub.core.upstream import UpstreamClient


logger = structlog.get_logger(__name__)


REACTIONS_PATH = "/reactions"


class ReactionValidationError(ValidationError):
    """Comment id or emoji missing."""

    def __init__(self, message: str = "commentId and emoji are required"):
        super().__init__(message)


class ReactionGateway:
    """Validation and forwarding for emoji reactions.

    ``propagate_upstream_errors`` decides what an upstream failure means for
    the caller. When False the failure is only logged and the reaction is
    acknowledged anyway (the legacy behaviour).
    """

    def __init__(
        self, upstream: UpstreamClient, propagate_upstream_errors: bool = True
    ):
        self.upstream = upstream
        self.propagate_upstream_errors = propagate_upstream_errors

    async def record_reaction(self, comment_id: str | None, emoji: str | None) -> None:
        """Add one ``emoji`` reaction to ``comment_id``.

        Raises:
            ReactionValidationError: a field is missing or empty. No upstream
                call is made.
            UpstreamError: the upstream call failed and errors propagate.
        """
        if not comment_id or not emoji:
            raise ReactionValidationError

        try:
            await self.upstream.post_json(
                REACTIONS_PATH,
                {"commentId": comment_id, "emoji": emoji},
                expect_body=False,
            )
        except UpstreamError as e:
            if self.propagate_upstream_errors:
                raise
            logger.warning(
                "reaction_upstream_failure_ignored",
                comment_id=comment_id,
                emoji=emoji,
                error=e.message,
            )
            return

        logger.info("reaction_recorded", comment_id=comment_id, emoji=emoji)
