"""Content routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from hivemind.application.usecase.content import (
    GetContentRequest,
    GetContentUseCase,
    ListContentRequest,
    ListContentResponse,
    ListContentUseCase,
    UpdateContentRequest,
    UpdateContentUseCase,
)
from hivemind.application.usecase.items import ContentItem
from hivemind.application.usecase.lifecycle import (
    LifecycleRequest,
    LifecycleResponse,
    SoftDeleteUseCase,
    UndeleteUseCase,
)
from hivemind.domain.error import DomainError
from hivemind.domain.model import ContentPatch
from hivemind.domain.service import JWTService
from hivemind.domain.value import VotableType
from hivemind.interface.api.errors import bad_request, to_http_error
from hivemind.interface.api.identity import require_caller

router = APIRouter(prefix="/content", tags=["content"], route_class=DishkaRoute)


@router.get("", response_model=ListContentResponse)
async def list_content(
    list_content_use_case: FromDishka[ListContentUseCase],
) -> ListContentResponse:
    """List content across all hives, oldest first."""
    return await list_content_use_case.execute(ListContentRequest())


@router.get("/{content_id}", response_model=ContentItem)
async def get_content(
    content_id: str,
    get_content_use_case: FromDishka[GetContentUseCase],
) -> ContentItem:
    """Get a content item by ID.

    Deleted content is still returned, flagged as deleted.

    Raises:
        HTTPException: 404 if the content doesn't exist
    """
    try:
        return await get_content_use_case.execute(
            GetContentRequest(content_id=content_id)
        )
    except DomainError as e:
        raise to_http_error(e, read=True)
    except ValueError as e:
        raise bad_request(e)


@router.patch("/{content_id}", response_model=ContentItem)
async def update_content(
    content_id: str,
    patch: ContentPatch,
    update_content_use_case: FromDishka[UpdateContentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ContentItem:
    """Edit a content item.

    Only the author can edit, and only while the content is not deleted.

    Args:
        content_id: Content UUID
        patch: Fields to change
        update_content_use_case: Update content use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Updated content

    Raises:
        HTTPException: If not authenticated, not the author, or content is deleted
    """
    caller = require_caller(jwt_service, auth_token, authorization, "edit content")

    try:
        request = UpdateContentRequest(
            content_id=content_id,
            account_id=str(caller.account_id),
            patch=patch,
        )
        return await update_content_use_case.execute(request)
    except DomainError as e:
        logfire.warn("Content update failed", content_id=content_id, error=str(e))
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)


@router.post("/{content_id}/delete", response_model=LifecycleResponse)
async def delete_content(
    content_id: str,
    soft_delete_use_case: FromDishka[SoftDeleteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> LifecycleResponse:
    """Soft delete a content item.

    Vote tallies are kept; the hive's content rollup is decremented.

    Raises:
        HTTPException: If not authenticated, already deleted, or not found
    """
    require_caller(jwt_service, auth_token, authorization, "delete content")

    try:
        return await soft_delete_use_case.execute(
            LifecycleRequest(votable_type=VotableType.CONTENT, votable_id=content_id)
        )
    except DomainError as e:
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)


@router.post("/{content_id}/undelete", response_model=LifecycleResponse)
async def undelete_content(
    content_id: str,
    undelete_use_case: FromDishka[UndeleteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> LifecycleResponse:
    """Restore a soft deleted content item.

    Raises:
        HTTPException: If not authenticated, not deleted, or not found
    """
    require_caller(jwt_service, auth_token, authorization, "restore content")

    try:
        return await undelete_use_case.execute(
            LifecycleRequest(votable_type=VotableType.CONTENT, votable_id=content_id)
        )
    except DomainError as e:
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)
