"""Comment gateway module.

Provides the comment board's comment surface:
- Listing comments (with reactions and replies)
- Creating top-level comments
- Creating replies attached to a parent comment

Note: Router is not exported here to avoid circular imports.
Import directly from ponhub.comments.router when needed.
"""

from .models import REACTION_EMOJIS, Comment, Reply
from .service import CommentGateway, CommentValidationError


__all__ = [
    "REACTION_EMOJIS",
    "Comment",
    "CommentGateway",
    "CommentValidationError",
    "Reply",
]
