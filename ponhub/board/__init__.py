"""Comment board presentation layer.

- Landing page with the comment board (``router``)
- ``BoardState``: the board's single UI state object
- ``BoardSession``: drives a ``BoardState`` against the gateway

Note: Router is not exported here to avoid circular imports.
Import directly from ponhub.board.router when needed.
"""

from .session import BoardSession
from .state import BoardPhase, BoardState, InvalidTransitionError


__all__ = ["BoardPhase", "BoardSession", "BoardState", "InvalidTransitionError"]
