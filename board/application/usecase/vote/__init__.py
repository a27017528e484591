"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_vote_status import (
    GetVoteStatusRequest,
    GetVoteStatusResponse,
    GetVoteStatusUseCase,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetVoteStatusRequest",
    "GetVoteStatusResponse",
    "GetVoteStatusUseCase",
]
