"""FastAPI dependencies for the reaction gateway."""

from typing import Annotated

from fastapi import Depends

from ponhub.config import Settings, get_settings
from ponhub.core.upstream import UpstreamClient, get_upstream_client

from .service import ReactionGateway


async def get_reaction_gateway(
    upstream: Annotated[UpstreamClient, Depends(get_upstream_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ReactionGateway:
    """Build a reaction gateway bound to the shared upstream client."""
    return ReactionGateway(
        upstream,
        propagate_upstream_errors=settings.reactions_propagate_upstream_errors,
    )


ReactionGatewayDep = Annotated[ReactionGateway, Depends(get_reaction_gateway)]
