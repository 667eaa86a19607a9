"""Domain services."""

from .base import Service
from .comment_service import CommentService, CommentThread
from .consistency_engine import (
    AggregateConsistencyEngine,
    CreationOutcome,
    LifecycleOutcome,
    VoteOutcome,
    VoteSummaryEntry,
)
from .content_service import ContentService
from .counter_propagator import CounterPropagator, PropagationResult
from .hive_service import HiveService
from .jwt_service import JWTService
from .lifecycle_service import LifecycleManager, LifecycleResult
from .votable_lookup import VotableTargetLookup
from .vote_ledger import LedgerTransition, VoteLedger

__all__ = [
    "AggregateConsistencyEngine",
    "CommentService",
    "CommentThread",
    "ContentService",
    "CounterPropagator",
    "CreationOutcome",
    "HiveService",
    "JWTService",
    "LedgerTransition",
    "LifecycleManager",
    "LifecycleOutcome",
    "LifecycleResult",
    "PropagationResult",
    "Service",
    "VotableTargetLookup",
    "VoteLedger",
    "VoteOutcome",
    "VoteSummaryEntry",
]
