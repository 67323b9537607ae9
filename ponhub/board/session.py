"""Comment board session.

Drives a ``BoardState`` against the gateway's HTTP surface: loading the
board, submitting comments and replies, and sending reactions. Failures are
logged and leave the board idle; they are never raised to the caller.
"""

import httpx
import structlog

from ponhub.comments.models import Comment, Reply

from .state import BoardState


logger = structlog.get_logger(__name__)


COMMENTS_ENDPOINT = "/api/comments"
REACTIONS_ENDPOINT = "/api/reactions"


class BoardSession:
    """Async driver for the comment board.

    Args:
        client: HTTP client whose base URL points at the gateway.
        state: Board state to drive. A fresh one is created when omitted.
        rollback_failed_reactions: Undo the optimistic increment when the
            gateway rejects a reaction. When False the local count stays
            ahead of the server until the next ``load``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        state: BoardState | None = None,
        rollback_failed_reactions: bool = True,
    ):
        self.client = client
        self.state = state or BoardState()
        self.rollback_failed_reactions = rollback_failed_reactions

    async def load(self) -> bool:
        """Replace the board with the gateway's comment list."""
        try:
            response = await self.client.get(COMMENTS_ENDPOINT)
            response.raise_for_status()
            comments = [Comment.model_validate(item) for item in response.json()]
        except (httpx.HTTPError, ValueError, TypeError) as e:
            logger.warning("board_load_failed", error=str(e))
            return False

        self.state.replace_comments(comments)
        return True

    async def submit_comment(self) -> Comment | None:
        """Submit the draft as a new top-level comment."""
        if not self.state.begin_comment():
            return None

        try:
            response = await self.client.post(
                COMMENTS_ENDPOINT,
                json={
                    "name": self.state.name.strip(),
                    "message": self.state.message.strip(),
                },
            )
            response.raise_for_status()
            comment = Comment.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("board_comment_submit_failed", error=str(e))
            self.state.fail_submission()
            return None

        self.state.complete_comment(comment)
        return comment

    async def submit_reply(self, comment_id: str) -> Reply | None:
        """Submit the draft as a reply to ``comment_id``."""
        if not self.state.begin_reply(comment_id):
            return None

        try:
            response = await self.client.post(
                COMMENTS_ENDPOINT,
                json={
                    "parentId": comment_id,
                    "name": self.state.name.strip(),
                    "message": self.state.message.strip(),
                },
            )
            response.raise_for_status()
            reply = Reply.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(
                "board_reply_submit_failed", parent_id=comment_id, error=str(e)
            )
            self.state.fail_submission()
            return None

        self.state.complete_reply(reply)
        return reply

    async def react(self, comment_id: str, emoji: str) -> bool:
        """Add a reaction locally at once, then confirm with the gateway."""
        applied = self.state.apply_reaction(comment_id, emoji)

        try:
            response = await self.client.post(
                REACTIONS_ENDPOINT,
                json={"commentId": comment_id, "emoji": emoji},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(
                "board_reaction_failed",
                comment_id=comment_id,
                emoji=emoji,
                error=str(e),
                rolled_back=applied and self.rollback_failed_reactions,
            )
            if applied and self.rollback_failed_reactions:
                self.state.rollback_reaction(comment_id, emoji)
            return False

        return True
