"""Domain services."""

from .base import Service
from .idea_service import IdeaService
from .moderation import contains_profanity
from .identity_service import IdentityService, generate_fingerprint
from .ranking import RankingService, filter_ideas, rank_ideas
from .vote_service import VoteService

__all__ = [
    "IdeaService",
    "IdentityService",
    "RankingService",
    "Service",
    "VoteService",
    "contains_profanity",
    "filter_ideas",
    "generate_fingerprint",
    "rank_ideas",
]
