"""Domain value objects for the idea board."""

from board.domain.value.identifiers import IdeaId, VoteId
from board.domain.value.types import (
    MAX_IDENTITY_LENGTH,
    AnonymousVoter,
    AuthenticatedVoter,
    BoardStatistics,
    RankingMode,
    VoteOutcome,
    VoterIdentity,
    VoterKind,
    voter_from_parts,
)

__all__ = [
    # Identifiers
    "IdeaId",
    "VoteId",
    # Types
    "MAX_IDENTITY_LENGTH",
    "AnonymousVoter",
    "AuthenticatedVoter",
    "BoardStatistics",
    "RankingMode",
    "VoteOutcome",
    "VoterIdentity",
    "VoterKind",
    "voter_from_parts",
]
