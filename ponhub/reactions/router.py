"""Reaction gateway API endpoints."""

from fastapi import APIRouter

from ponhub.comments.schemas import ErrorResponse
from ponhub.core.errors import GatewayError, handle_gateway_error

from .dependencies import ReactionGatewayDep
from .schemas import ReactionRecordedResponse, RecordReactionRequest


router = APIRouter(prefix="/api/reactions", tags=["reactions"])


@router.post(
    "",
    response_model=ReactionRecordedResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Record reaction",
)
async def record_reaction(
    data: RecordReactionRequest,
    gateway: ReactionGatewayDep,
) -> ReactionRecordedResponse:
    """Add one emoji reaction to a comment."""
    try:
        await gateway.record_reaction(comment_id=data.comment_id, emoji=data.emoji)
    except GatewayError as e:
        raise handle_gateway_error(e, "Failed to record reaction") from e

    return ReactionRecordedResponse()
