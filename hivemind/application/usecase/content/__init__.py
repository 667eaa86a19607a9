"""Content use cases."""

from .create_content import (
    CreateContentRequest,
    CreateContentResponse,
    CreateContentUseCase,
)
from .get_content import GetContentRequest, GetContentUseCase
from .list_content import ListContentRequest, ListContentResponse, ListContentUseCase
from .update_content import UpdateContentRequest, UpdateContentUseCase

__all__ = [
    "CreateContentRequest",
    "CreateContentResponse",
    "CreateContentUseCase",
    "GetContentRequest",
    "GetContentUseCase",
    "ListContentRequest",
    "ListContentResponse",
    "ListContentUseCase",
    "UpdateContentRequest",
    "UpdateContentUseCase",
]
