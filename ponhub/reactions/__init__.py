"""Reaction gateway module.

Records emoji reactions on comments by forwarding increments to the
upstream comment service.
"""

from .service import ReactionGateway, ReactionValidationError


__all__ = ["ReactionGateway", "ReactionValidationError"]
