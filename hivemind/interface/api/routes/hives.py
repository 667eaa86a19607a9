"""Hive routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel, Field

from hivemind.application.usecase.content import (
    CreateContentRequest,
    CreateContentResponse,
    CreateContentUseCase,
    ListContentRequest,
    ListContentResponse,
    ListContentUseCase,
)
from hivemind.application.usecase.hive import (
    CreateHiveRequest,
    CreateHiveUseCase,
    GetHiveRequest,
    GetHiveUseCase,
    ListHivesResponse,
    ListHivesUseCase,
    SetHiveFlagRequest,
    SetHiveFlagUseCase,
    UpdateHiveRequest,
    UpdateHiveUseCase,
)
from hivemind.application.usecase.items import HiveItem
from hivemind.domain.error import DomainError
from hivemind.domain.model import HivePatch
from hivemind.domain.service import JWTService
from hivemind.domain.value import HiveStatusFlag
from hivemind.interface.api.errors import bad_request, to_http_error
from hivemind.interface.api.identity import require_caller

router = APIRouter(prefix="/hives", tags=["hives"], route_class=DishkaRoute)


class CreateHiveAPIRequest(BaseModel):
    """API request for creating a hive."""

    name: str
    description: str = Field(min_length=1, max_length=256)


class CreateContentAPIRequest(BaseModel):
    """API request for posting content into a hive."""

    title: str = Field(min_length=1, max_length=300)
    message: str = ""
    link: str | None = None
    image_link: str | None = None


@router.post("", response_model=HiveItem, status_code=status.HTTP_201_CREATED)
async def create_hive(
    request: CreateHiveAPIRequest,
    create_hive_use_case: FromDishka[CreateHiveUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> HiveItem:
    """Create a hive owned by the caller.

    Args:
        request: Hive name and description
        create_hive_use_case: Create hive use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Created hive with zeroed rollups

    Raises:
        HTTPException: If not authenticated, the name is invalid or taken
    """
    caller = require_caller(jwt_service, auth_token, authorization, "create hives")

    try:
        use_case_request = CreateHiveRequest(
            name=request.name,
            description=request.description,
            account_id=str(caller.account_id),
            username=str(caller.username),
        )
        return await create_hive_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)


@router.get("", response_model=ListHivesResponse)
async def list_hives(
    list_hives_use_case: FromDishka[ListHivesUseCase],
) -> ListHivesResponse:
    """List all hives, oldest first."""
    return await list_hives_use_case.execute()


@router.get("/{hive_id}", response_model=HiveItem)
async def get_hive(
    hive_id: str,
    get_hive_use_case: FromDishka[GetHiveUseCase],
) -> HiveItem:
    """Get a hive with its rollups.

    Raises:
        HTTPException: 404 if the hive doesn't exist
    """
    try:
        return await get_hive_use_case.execute(GetHiveRequest(hive_id=hive_id))
    except DomainError as e:
        raise to_http_error(e, read=True)
    except ValueError as e:
        raise bad_request(e)


@router.patch("/{hive_id}", response_model=HiveItem)
async def update_hive(
    hive_id: str,
    patch: HivePatch,
    update_hive_use_case: FromDishka[UpdateHiveUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> HiveItem:
    """Update a hive's description.

    Raises:
        HTTPException: If not authenticated or the hive doesn't exist
    """
    require_caller(jwt_service, auth_token, authorization, "edit hives")

    try:
        return await update_hive_use_case.execute(
            UpdateHiveRequest(hive_id=hive_id, patch=patch)
        )
    except DomainError as e:
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)


async def _set_flag(
    use_case: SetHiveFlagUseCase,
    hive_id: str,
    flag: HiveStatusFlag,
    value: bool,
) -> HiveItem:
    try:
        return await use_case.execute(
            SetHiveFlagRequest(hive_id=hive_id, flag=flag, value=value)
        )
    except DomainError as e:
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)


@router.post("/{hive_id}/archive", response_model=HiveItem)
async def archive_hive(
    hive_id: str,
    set_hive_flag_use_case: FromDishka[SetHiveFlagUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> HiveItem:
    """Archive a hive.

    Raises:
        HTTPException: If the hive is already archived
    """
    require_caller(jwt_service, auth_token, authorization, "archive hives")
    return await _set_flag(
        set_hive_flag_use_case, hive_id, HiveStatusFlag.ARCHIVED, True
    )


@router.post("/{hive_id}/unarchive", response_model=HiveItem)
async def unarchive_hive(
    hive_id: str,
    set_hive_flag_use_case: FromDishka[SetHiveFlagUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> HiveItem:
    """Unarchive a hive."""
    require_caller(jwt_service, auth_token, authorization, "unarchive hives")
    return await _set_flag(
        set_hive_flag_use_case, hive_id, HiveStatusFlag.ARCHIVED, False
    )


@router.post("/{hive_id}/ban", response_model=HiveItem)
async def ban_hive(
    hive_id: str,
    set_hive_flag_use_case: FromDishka[SetHiveFlagUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> HiveItem:
    """Ban a hive."""
    require_caller(jwt_service, auth_token, authorization, "ban hives")
    return await _set_flag(set_hive_flag_use_case, hive_id, HiveStatusFlag.BANNED, True)


@router.post("/{hive_id}/unban", response_model=HiveItem)
async def unban_hive(
    hive_id: str,
    set_hive_flag_use_case: FromDishka[SetHiveFlagUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> HiveItem:
    """Lift a hive's ban."""
    require_caller(jwt_service, auth_token, authorization, "unban hives")
    return await _set_flag(
        set_hive_flag_use_case, hive_id, HiveStatusFlag.BANNED, False
    )


@router.post(
    "/{hive_id}/content",
    response_model=CreateContentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_content(
    hive_id: str,
    request: CreateContentAPIRequest,
    create_content_use_case: FromDishka[CreateContentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateContentResponse:
    """Post a content item into a hive.

    The hive's content rollup is incremented in the same transaction.

    Args:
        hive_id: Hive UUID
        request: Content fields
        create_content_use_case: Create content use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Created content and the updated hive

    Raises:
        HTTPException: If not authenticated or the hive or author doesn't exist
    """
    caller = require_caller(jwt_service, auth_token, authorization, "post content")

    try:
        use_case_request = CreateContentRequest(
            hive_id=hive_id,
            title=request.title,
            message=request.message,
            link=request.link,
            image_link=request.image_link,
            account_id=str(caller.account_id),
            username=str(caller.username),
        )
        return await create_content_use_case.execute(use_case_request)
    except DomainError as e:
        raise to_http_error(e)
    except ValueError as e:
        raise bad_request(e)


@router.get("/{hive_id}/content", response_model=ListContentResponse)
async def list_hive_content(
    hive_id: str,
    list_content_use_case: FromDishka[ListContentUseCase],
) -> ListContentResponse:
    """List the content posted into a hive.

    Raises:
        HTTPException: 404 if the hive doesn't exist
    """
    try:
        return await list_content_use_case.execute(ListContentRequest(hive_id=hive_id))
    except DomainError as e:
        raise to_http_error(e, read=True)
    except ValueError as e:
        raise bad_request(e)
