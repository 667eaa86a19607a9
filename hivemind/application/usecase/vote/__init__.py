"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase, VoteResponse
from .get_vote_summary import (
    GetVoteSummaryRequest,
    GetVoteSummaryResponse,
    GetVoteSummaryUseCase,
    VoteSummaryItem,
)
from .withdraw_vote import WithdrawVoteRequest, WithdrawVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "VoteResponse",
    "GetVoteSummaryRequest",
    "GetVoteSummaryResponse",
    "GetVoteSummaryUseCase",
    "VoteSummaryItem",
    "WithdrawVoteRequest",
    "WithdrawVoteUseCase",
]
