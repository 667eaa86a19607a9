"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field

from hivemind.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
    GetCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from hivemind.application.usecase.items import CommentItem
from hivemind.application.usecase.lifecycle import (
    LifecycleRequest,
    LifecycleResponse,
    SoftDeleteUseCase,
    UndeleteUseCase,
)
from hivemind.domain.error import DomainError
from hivemind.domain.model import CommentPatch
from hivemind.domain.service import JWTService
from hivemind.domain.value import VotableType
from hivemind.interface.api.errors import bad_request, to_http_error
from hivemind.interface.api.identity import require_caller

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment or reply."""

    message: str = Field(min_length=1, max_length=2048)


@router.post(
    "/content/{content_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    content_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Comment on a content item.

    Requires authentication.

    Args:
        content_id: Content UUID
        request: Comment text
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Created comment with the updated content and hive comment counts

    Raises:
        HTTPException: If not authenticated or the content doesn't exist
    """
    caller = require_caller(jwt_service, auth_token, authorization, "comment")

    try:
        use_case_request = CreateCommentRequest(
            content_id=content_id,
            message=request.message,
            account_id=str(caller.account_id),
            username=str(caller.username),
        )
        return await create_comment_use_case.execute(use_case_request)
    except DomainError as e:
        logfire.warn("Comment creation failed", content_id=content_id, error=str(e))
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)


@router.post(
    "/content/{content_id}/comments/{parent_id}/replies",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    content_id: str,
    parent_id: str,
    request: CreateCommentAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Reply to a top-level comment.

    Replies cannot themselves be replied to.

    Raises:
        HTTPException: If not authenticated, the parent is missing or is a reply
    """
    caller = require_caller(jwt_service, auth_token, authorization, "reply")

    try:
        use_case_request = CreateReplyRequest(
            content_id=content_id,
            parent_id=parent_id,
            message=request.message,
            account_id=str(caller.account_id),
            username=str(caller.username),
        )
        return await create_reply_use_case.execute(use_case_request)
    except DomainError as e:
        logfire.warn("Reply creation failed", parent_id=parent_id, error=str(e))
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)


@router.get("/content/{content_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    content_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """List the comments on a content item, newest first.

    Deleted comments are shown with a placeholder message.

    Raises:
        HTTPException: 404 if the content doesn't exist
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(content_id=content_id)
        )
    except DomainError as e:
        raise to_http_error(e, read=True)
    except ValueError as e:
        raise bad_request(e)


@router.get("/comments/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get a comment by ID."""
    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(comment_id=comment_id)
        )
    except DomainError as e:
        raise to_http_error(e, read=True)
    except ValueError as e:
        raise bad_request(e)


@router.get("/comments/{comment_id}/replies", response_model=GetCommentThreadResponse)
async def get_comment_thread(
    comment_id: str,
    get_comment_thread_use_case: FromDishka[GetCommentThreadUseCase],
) -> GetCommentThreadResponse:
    """Get a comment together with its replies."""
    try:
        return await get_comment_thread_use_case.execute(
            GetCommentRequest(comment_id=comment_id)
        )
    except DomainError as e:
        raise to_http_error(e, read=True)
    except ValueError as e:
        raise bad_request(e)


@router.patch("/comments/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    patch: CommentPatch,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Edit a comment's message.

    Only the comment author can edit.

    Raises:
        HTTPException: If not authenticated, not the author, or comment is deleted
    """
    caller = require_caller(jwt_service, auth_token, authorization, "edit comments")

    try:
        request = UpdateCommentRequest(
            comment_id=comment_id,
            account_id=str(caller.account_id),
            patch=patch,
        )
        return await update_comment_use_case.execute(request)
    except DomainError as e:
        logfire.warn("Comment update failed", comment_id=comment_id, error=str(e))
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)


@router.post("/comments/{comment_id}/delete", response_model=LifecycleResponse)
async def delete_comment(
    comment_id: str,
    soft_delete_use_case: FromDishka[SoftDeleteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> LifecycleResponse:
    """Soft delete a comment.

    The comment keeps its votes; its message is hidden on read and the
    content and hive comment counts are decremented.

    Raises:
        HTTPException: If not authenticated, already deleted, or not found
    """
    require_caller(jwt_service, auth_token, authorization, "delete comments")

    try:
        return await soft_delete_use_case.execute(
            LifecycleRequest(votable_type=VotableType.COMMENT, votable_id=comment_id)
        )
    except DomainError as e:
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)


@router.post("/comments/{comment_id}/undelete", response_model=LifecycleResponse)
async def undelete_comment(
    comment_id: str,
    undelete_use_case: FromDishka[UndeleteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> LifecycleResponse:
    """Restore a soft deleted comment."""
    require_caller(jwt_service, auth_token, authorization, "restore comments")

    try:
        return await undelete_use_case.execute(
            LifecycleRequest(votable_type=VotableType.COMMENT, votable_id=comment_id)
        )
    except DomainError as e:
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)
