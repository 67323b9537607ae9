"""FastAPI dependencies for the comment gateway."""

from typing import Annotated

from fastapi import Depends

from ponhub.core.upstream import UpstreamClient, get_upstream_client

from .service import CommentGateway


UpstreamClientDep = Annotated[UpstreamClient, Depends(get_upstream_client)]


async def get_comment_gateway(upstream: UpstreamClientDep) -> CommentGateway:
    """Build a comment gateway bound to the shared upstream client."""
    return CommentGateway(upstream)


CommentGatewayDep = Annotated[CommentGateway, Depends(get_comment_gateway)]
