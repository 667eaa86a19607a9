"""Hive use cases."""

from .create_hive import CreateHiveRequest, CreateHiveUseCase
from .get_hive import GetHiveRequest, GetHiveUseCase, ListHivesResponse, ListHivesUseCase
from .update_hive import (
    SetHiveFlagRequest,
    SetHiveFlagUseCase,
    UpdateHiveRequest,
    UpdateHiveUseCase,
)

__all__ = [
    "CreateHiveRequest",
    "CreateHiveUseCase",
    "GetHiveRequest",
    "GetHiveUseCase",
    "ListHivesResponse",
    "ListHivesUseCase",
    "SetHiveFlagRequest",
    "SetHiveFlagUseCase",
    "UpdateHiveRequest",
    "UpdateHiveUseCase",
]
