"""Comment gateway API endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from ponhub.core.errors import GatewayError, handle_gateway_error

from .dependencies import CommentGatewayDep
from .models import Comment
from .schemas import CreateCommentRequest, ErrorResponse


router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.get(
    "",
    response_model=list[Comment],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="List comments",
)
async def list_comments(gateway: CommentGatewayDep) -> list[Comment]:
    """Return every comment with its reactions and replies."""
    try:
        return await gateway.list_comments()
    except GatewayError as e:
        raise handle_gateway_error(e, "Failed to fetch comments") from e


@router.post(
    "",
    response_model=None,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Create comment or reply",
)
async def create_comment(
    data: CreateCommentRequest,
    gateway: CommentGatewayDep,
) -> JSONResponse:
    """Create a comment, or a reply when ``parentId`` is given.

    Name and message are trimmed and must not be empty. The body is the
    created Comment or Reply as returned by the comment service.
    """
    try:
        entity = await gateway.create_comment(
            name=data.name,
            message=data.message,
            parent_id=data.parent_id,
        )
    except GatewayError as e:
        raise handle_gateway_error(e, "Failed to create comment") from e

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=entity.model_dump(by_alias=True, exclude_none=True),
    )
