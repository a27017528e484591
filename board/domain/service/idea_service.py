"""Idea domain service."""

import logfire

from board.domain.error import IdeaNotFoundError, ValidationError
from board.domain.model.idea import Idea
from board.domain.repository import IdeaRepository
from board.domain.value import BoardStatistics, IdeaId, VoterIdentity
from board.util.clock import MonotonicClock

from .base import Service
from .moderation import contains_profanity


class IdeaService(Service):
    """Domain service for idea operations (the idea store)."""

    def __init__(self, idea_repository: IdeaRepository, clock: MonotonicClock) -> None:
        """Initialize idea service.

        Args:
            idea_repository: Idea repository
            clock: Clock assigning creation timestamps
        """
        self.idea_repository = idea_repository
        self.clock = clock

    async def create_idea(
        self, title: str, description: str, author: VoterIdentity
    ) -> Idea:
        """Create an idea.

        Args:
            title: Idea title
            description: Idea description
            author: Identity of the submitter

        Returns:
            The stored idea

        Raises:
            ValidationError: If title or description is blank or contains
                profanity
        """
        title = title.strip()
        description = description.strip()
        if not title:
            raise ValidationError("Idea title cannot be empty")
        if not description:
            raise ValidationError("Idea description cannot be empty")
        if contains_profanity(title) or contains_profanity(description):
            logfire.info("Idea rejected by profanity filter", author=str(author))
            raise ValidationError(
                "Your submission contains inappropriate language. "
                "Please revise and try again."
            )

        with logfire.span("idea_service.create_idea", title=title, author=str(author)):
            idea = await self.idea_repository.add(
                title=title,
                description=description,
                author=author,
                created_at=self.clock.now(),
            )
            logfire.info("Idea created", idea_id=idea.id)
            return idea

    async def get_idea_by_id(self, idea_id: IdeaId) -> Idea | None:
        """Get an idea by ID.

        Args:
            idea_id: Idea ID

        Returns:
            Idea if found, None otherwise
        """
        with logfire.span("idea_service.get_idea_by_id", idea_id=idea_id):
            idea = await self.idea_repository.find_by_id(idea_id)

            if not idea:
                logfire.warn("Idea not found", idea_id=idea_id)

            return idea

    async def require_idea(self, idea_id: IdeaId) -> Idea:
        """Get an idea by ID or fail.

        Raises:
            IdeaNotFoundError: If the idea does not exist
        """
        idea = await self.get_idea_by_id(idea_id)
        if idea is None:
            raise IdeaNotFoundError(idea_id)
        return idea

    async def list_ideas(self) -> list[Idea]:
        """List every idea, unordered."""
        with logfire.span("idea_service.list_ideas"):
            return await self.idea_repository.find_all()

    async def delete_idea(self, idea_id: IdeaId) -> None:
        """Delete an idea.

        Raises:
            IdeaNotFoundError: If the idea does not exist
        """
        with logfire.span("idea_service.delete_idea", idea_id=idea_id):
            deleted = await self.idea_repository.delete(idea_id)
            if not deleted:
                raise IdeaNotFoundError(idea_id)
            logfire.info("Idea deleted", idea_id=idea_id)

    async def get_statistics(self) -> BoardStatistics:
        """Totals of ideas and votes on the board."""
        with logfire.span("idea_service.get_statistics"):
            return BoardStatistics(
                total_ideas=await self.idea_repository.count(),
                total_votes=await self.idea_repository.sum_vote_counts(),
            )
