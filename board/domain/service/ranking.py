"""Ranking engine.

Pure ordering functions over idea snapshots plus a thin service that reads
the current snapshot from the idea store.

Recent: created_at descending; equal timestamps put the later-inserted
(higher id) idea first.
Popular: vote_count descending; ties fall back to the Recent order.
"""

from typing import Iterable, Sequence

import logfire

from board.domain.model.idea import Idea
from board.domain.repository import IdeaRepository
from board.domain.value import RankingMode

from .base import Service


def _recent_key(idea: Idea):
    return (idea.created_at, idea.id)


def _popular_key(idea: Idea):
    return (idea.vote_count, idea.created_at, idea.id)


def rank_ideas(mode: RankingMode, ideas: Iterable[Idea]) -> list[Idea]:
    """Order ideas for display.

    The key is total (ids are unique) so the result is deterministic for
    any input order.

    Args:
        mode: Ranking mode
        ideas: Snapshot of ideas

    Returns:
        A new list, ordered for display
    """
    if mode == RankingMode.POPULAR:
        return sorted(ideas, key=_popular_key, reverse=True)
    return sorted(ideas, key=_recent_key, reverse=True)


def filter_ideas(
    ideas: Sequence[Idea], query: str | None, include_description: bool = True
) -> list[Idea]:
    """Case-insensitive substring search over ranked ideas.

    Preserves the incoming order. A blank query matches everything.

    Args:
        ideas: Ranked ideas
        query: Search text
        include_description: Also match against the description

    Returns:
        Matching ideas
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(ideas)

    def matches(idea: Idea) -> bool:
        if needle in idea.title.lower():
            return True
        return include_description and needle in idea.description.lower()

    return [idea for idea in ideas if matches(idea)]


class RankingService(Service):
    """Domain service producing ranked views of the board."""

    def __init__(self, idea_repository: IdeaRepository) -> None:
        """Initialize ranking service.

        Args:
            idea_repository: Idea repository
        """
        self.idea_repository = idea_repository

    async def ranked(self, mode: RankingMode, query: str | None = None) -> list[Idea]:
        """Rank the current snapshot of ideas.

        Args:
            mode: Ranking mode
            query: Optional search text applied after ranking

        Returns:
            Ranked (and filtered) ideas
        """
        with logfire.span("ranking_service.ranked", mode=mode.value):
            ideas = await self.idea_repository.find_all()
            return filter_ideas(rank_ideas(mode, ideas), query)
