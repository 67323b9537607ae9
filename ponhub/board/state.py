"""Comment board UI state.

One ``BoardState`` holds everything the board shows and edits: the loaded
comments, the draft name/message, which comment's reply form is open and
which submission is in flight. It is created on first load, changed only
through the transition methods below and discarded with its session.

Submission phases::

    idle --begin_comment--> submitting_comment --complete/fail--> idle
    idle --begin_reply(id)--> submitting_reply(id) --complete/fail--> idle

Reactions do not take part in the phases; they are applied optimistically
whatever the board is doing.
"""

from dataclasses import dataclass, field
from enum import Enum

from ponhub.comments.models import Comment, Reply


class BoardPhase(str, Enum):
    """Submission phase of the board."""

    IDLE = "idle"
    SUBMITTING_COMMENT = "submitting_comment"
    SUBMITTING_REPLY = "submitting_reply"


class InvalidTransitionError(Exception):
    """A completion was reported for a submission that is not in flight."""

    def __init__(self, expected: BoardPhase, actual: BoardPhase):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected phase {expected.value}, board is {actual.value}")


@dataclass
class BoardState:
    """Transient state of the comment board."""

    comments: list[Comment] = field(default_factory=list)
    name: str = ""
    message: str = ""
    phase: BoardPhase = BoardPhase.IDLE
    # Comment whose reply form is open
    replying_to: str | None = None
    # Parent of the reply currently being submitted
    reply_target: str | None = None

    @property
    def is_submitting(self) -> bool:
        return self.phase is not BoardPhase.IDLE

    @property
    def draft_ready(self) -> bool:
        """Whether both draft fields are non-empty after trimming."""
        return bool(self.name.strip() and self.message.strip())

    def find(self, comment_id: str) -> Comment | None:
        return next((c for c in self.comments if c.id == comment_id), None)

    def replace_comments(self, comments: list[Comment]) -> None:
        """Load or refresh the board from the gateway."""
        self.comments = list(comments)

    def toggle_reply_target(self, comment_id: str) -> None:
        """Open the reply form for ``comment_id``, or close it if open."""
        self.replying_to = None if self.replying_to == comment_id else comment_id

    # ==========================================================================
    # Submissions
    # ==========================================================================

    def begin_comment(self) -> bool:
        """Start submitting the draft as a new comment.

        Returns False, leaving the state untouched, when the draft is blank
        or another submission is in flight.
        """
        if self.is_submitting or not self.draft_ready:
            return False
        self.phase = BoardPhase.SUBMITTING_COMMENT
        return True

    def begin_reply(self, comment_id: str) -> bool:
        """Start submitting the draft as a reply to ``comment_id``."""
        if self.is_submitting or not self.draft_ready:
            return False
        self.phase = BoardPhase.SUBMITTING_REPLY
        self.reply_target = comment_id
        return True

    def complete_comment(self, comment: Comment) -> None:
        """Show the created comment first and clear the draft."""
        self._expect(BoardPhase.SUBMITTING_COMMENT)
        self.comments.insert(0, comment)
        self._clear_draft()
        self.phase = BoardPhase.IDLE

    def complete_reply(self, reply: Reply) -> None:
        """Append the created reply to its parent and close the reply form."""
        self._expect(BoardPhase.SUBMITTING_REPLY)
        parent = self.find(self.reply_target) if self.reply_target else None
        if parent is not None:
            parent.replies.append(reply)
        self._clear_draft()
        self.replying_to = None
        self.reply_target = None
        self.phase = BoardPhase.IDLE

    def fail_submission(self) -> None:
        """Return to idle without changing comments or the draft."""
        self.phase = BoardPhase.IDLE
        self.reply_target = None

    # ==========================================================================
    # Reactions
    # ==========================================================================

    def apply_reaction(self, comment_id: str, emoji: str) -> bool:
        """Optimistically add one ``emoji`` to a comment.

        Returns whether a comment was updated.
        """
        comment = self.find(comment_id)
        if comment is None:
            return False
        comment.reactions[emoji] = comment.reaction_count(emoji) + 1
        return True

    def rollback_reaction(self, comment_id: str, emoji: str) -> bool:
        """Undo one optimistic reaction. Counts never go below zero."""
        comment = self.find(comment_id)
        if comment is None or comment.reaction_count(emoji) == 0:
            return False
        comment.reactions[emoji] = comment.reaction_count(emoji) - 1
        return True

    def _clear_draft(self) -> None:
        self.name = ""
        self.message = ""

    def _expect(self, phase: BoardPhase) -> None:
        if self.phase is not phase:
            raise InvalidTransitionError(phase, self.phase)
