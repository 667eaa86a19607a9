"""Soft delete/undelete use cases."""

from .soft_delete import LifecycleRequest, LifecycleResponse, SoftDeleteUseCase
from .undelete import UndeleteUseCase

__all__ = [
    "LifecycleRequest",
    "LifecycleResponse",
    "SoftDeleteUseCase",
    "UndeleteUseCase",
]
