"""Vote routes.

Upvote and downvote routes share one cast/withdraw operation parameterized
by direction.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from hivemind.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteSummaryRequest,
    GetVoteSummaryResponse,
    GetVoteSummaryUseCase,
    VoteResponse,
    WithdrawVoteRequest,
    WithdrawVoteUseCase,
)
from hivemind.domain.error import DomainError
from hivemind.domain.service import JWTService
from hivemind.domain.value import VotableType, VoteDirection
from hivemind.interface.api.errors import bad_request, to_http_error
from hivemind.interface.api.identity import require_caller

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


async def _cast(
    use_case: CastVoteUseCase,
    votable_type: VotableType,
    votable_id: str,
    account_id: str,
    direction: VoteDirection,
) -> VoteResponse:
    try:
        request = CastVoteRequest(
            votable_type=votable_type,
            votable_id=votable_id,
            account_id=account_id,
            direction=direction,
        )
        return await use_case.execute(request)
    except DomainError as e:
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)


async def _withdraw(
    use_case: WithdrawVoteUseCase,
    votable_type: VotableType,
    votable_id: str,
    account_id: str,
    direction: VoteDirection,
) -> VoteResponse:
    try:
        request = WithdrawVoteRequest(
            votable_type=votable_type,
            votable_id=votable_id,
            account_id=account_id,
            direction=direction,
        )
        return await use_case.execute(request)
    except DomainError as e:
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)


@router.post("/content/{content_id}/upvote", response_model=VoteResponse)
async def upvote_content(
    content_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Upvote a content item.

    Requires authentication. A voter with an active vote must withdraw it
    before voting in the other direction.

    Args:
        content_id: Content UUID
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Updated counters of the content and its hive

    Raises:
        HTTPException: If not authenticated, already voted, or content not found
    """
    caller = require_caller(jwt_service, auth_token, authorization, "vote")
    return await _cast(
        cast_vote_use_case,
        VotableType.CONTENT,
        content_id,
        str(caller.account_id),
        VoteDirection.UP,
    )


@router.post("/content/{content_id}/downvote", response_model=VoteResponse)
async def downvote_content(
    content_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Downvote a content item.

    Raises:
        HTTPException: If not authenticated, already voted, or content not found
    """
    caller = require_caller(jwt_service, auth_token, authorization, "vote")
    return await _cast(
        cast_vote_use_case,
        VotableType.CONTENT,
        content_id,
        str(caller.account_id),
        VoteDirection.DOWN,
    )


@router.delete("/content/{content_id}/upvote", response_model=VoteResponse)
async def remove_content_upvote(
    content_id: str,
    withdraw_vote_use_case: FromDishka[WithdrawVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Withdraw an upvote from a content item.

    Raises:
        HTTPException: If not authenticated, not upvoted, or content not found
    """
    caller = require_caller(jwt_service, auth_token, authorization, "remove a vote")
    return await _withdraw(
        withdraw_vote_use_case,
        VotableType.CONTENT,
        content_id,
        str(caller.account_id),
        VoteDirection.UP,
    )


@router.delete("/content/{content_id}/downvote", response_model=VoteResponse)
async def remove_content_downvote(
    content_id: str,
    withdraw_vote_use_case: FromDishka[WithdrawVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Withdraw a downvote from a content item."""
    caller = require_caller(jwt_service, auth_token, authorization, "remove a vote")
    return await _withdraw(
        withdraw_vote_use_case,
        VotableType.CONTENT,
        content_id,
        str(caller.account_id),
        VoteDirection.DOWN,
    )


@router.post("/comments/{comment_id}/upvote", response_model=VoteResponse)
async def upvote_comment(
    comment_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Upvote a comment.

    Comment votes do not change hive rollups.

    Raises:
        HTTPException: If not authenticated, already voted, or comment not found
    """
    caller = require_caller(jwt_service, auth_token, authorization, "vote")
    return await _cast(
        cast_vote_use_case,
        VotableType.COMMENT,
        comment_id,
        str(caller.account_id),
        VoteDirection.UP,
    )


@router.post("/comments/{comment_id}/downvote", response_model=VoteResponse)
async def downvote_comment(
    comment_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Downvote a comment."""
    caller = require_caller(jwt_service, auth_token, authorization, "vote")
    return await _cast(
        cast_vote_use_case,
        VotableType.COMMENT,
        comment_id,
        str(caller.account_id),
        VoteDirection.DOWN,
    )


@router.delete("/comments/{comment_id}/upvote", response_model=VoteResponse)
async def remove_comment_upvote(
    comment_id: str,
    withdraw_vote_use_case: FromDishka[WithdrawVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Withdraw an upvote from a comment."""
    caller = require_caller(jwt_service, auth_token, authorization, "remove a vote")
    return await _withdraw(
        withdraw_vote_use_case,
        VotableType.COMMENT,
        comment_id,
        str(caller.account_id),
        VoteDirection.UP,
    )


@router.delete("/comments/{comment_id}/downvote", response_model=VoteResponse)
async def remove_comment_downvote(
    comment_id: str,
    withdraw_vote_use_case: FromDishka[WithdrawVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> VoteResponse:
    """Withdraw a downvote from a comment."""
    caller = require_caller(jwt_service, auth_token, authorization, "remove a vote")
    return await _withdraw(
        withdraw_vote_use_case,
        VotableType.COMMENT,
        comment_id,
        str(caller.account_id),
        VoteDirection.DOWN,
    )


@router.get("/votes/comments", response_model=GetVoteSummaryResponse)
async def get_comment_vote_summary(
    get_vote_summary_use_case: FromDishka[GetVoteSummaryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetVoteSummaryResponse:
    """List the caller's active comment votes, grouped by content.

    Returns:
        One entry per content item with the upvoted and downvoted comment ids

    Raises:
        HTTPException: 404 if the caller has no comment votes
    """
    caller = require_caller(jwt_service, auth_token, authorization, "list votes")
    try:
        request = GetVoteSummaryRequest(account_id=str(caller.account_id))
        return await get_vote_summary_use_case.execute(request)
    except DomainError as e:
        raise to_http_error(e, read=True)
