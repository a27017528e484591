"""Vote domain service."""

from typing import Sequence
from uuid import uuid4

import logfire

from board.domain.error import IdeaNotFoundError
from board.domain.model.vote import Vote
from board.domain.repository import IdeaRepository, VoteRepository
from board.domain.value import IdeaId, VoteId, VoteOutcome, VoterIdentity
from board.util.clock import MonotonicClock

from .base import Service


class VoteService(Service):
    """Domain service for vote operations (the vote ledger).

    A voter may vote at most once per idea. The ledger is the only writer
    of an idea's cached vote count.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        idea_repository: IdeaRepository,
        clock: MonotonicClock,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            idea_repository: Idea repository
            clock: Clock stamping cast votes
        """
        self.vote_repository = vote_repository
        self.idea_repository = idea_repository
        self.clock = clock

    async def cast_vote(self, idea_id: IdeaId, voter: VoterIdentity) -> VoteOutcome:
        """Cast a vote for an idea.

        Records the vote only if the voter has not voted on the idea yet,
        then atomically increments the idea's vote count. A repeat vote is
        not an error: it returns accepted=False with the unchanged count.

        Args:
            idea_id: Idea ID
            voter: Identity of the voter

        Returns:
            Vote outcome with the idea's count after the attempt

        Raises:
            IdeaNotFoundError: If the idea does not exist
        """
        with logfire.span("vote_service.cast_vote", idea_id=idea_id, voter=str(voter)):
            # Check if idea exists
            idea = await self.idea_repository.find_by_id(idea_id)
            if not idea:
                logfire.warn("Vote on non-existent idea", idea_id=idea_id)
                raise IdeaNotFoundError(idea_id)

            vote = Vote(
                id=VoteId(uuid4()),
                idea_id=idea_id,
                voter=voter,
                cast_at=self.clock.now(),
            )

            # Conditional insert on (idea_id, voter), the only duplicate guard
            inserted = await self.vote_repository.add_if_absent(vote)
            if not inserted:
                current = await self.idea_repository.find_by_id(idea_id)
                if current is None:
                    raise IdeaNotFoundError(idea_id)
                logfire.info(
                    "Duplicate vote ignored", idea_id=idea_id, voter=str(voter)
                )
                return VoteOutcome(accepted=False, new_count=current.vote_count)

            new_count = await self.idea_repository.increment_vote_count(idea_id)
            logfire.info("Vote recorded", idea_id=idea_id, new_count=new_count)
            return VoteOutcome(accepted=True, new_count=new_count)

    async def has_voted(self, idea_id: IdeaId, voter: VoterIdentity) -> bool:
        """Check whether a voter has voted on an idea.

        Args:
            idea_id: Idea ID
            voter: Identity of the voter

        Returns:
            True if a vote is recorded for (idea_id, voter)
        """
        return await self.vote_repository.exists(idea_id, voter)

    async def voted_idea_ids(
        self, voter: VoterIdentity, idea_ids: Sequence[IdeaId]
    ) -> set[IdeaId]:
        """Which of the given ideas a voter has voted on."""
        if not idea_ids:
            return set()
        return await self.vote_repository.find_voted_idea_ids(voter, idea_ids)

    async def purge_votes(self, idea_id: IdeaId) -> int:
        """Drop the ledger entries of an idea that is being deleted.

        Args:
            idea_id: Idea ID

        Returns:
            Number of votes removed
        """
        with logfire.span("vote_service.purge_votes", idea_id=idea_id):
            removed = await self.vote_repository.delete_by_idea(idea_id)
            logfire.info("Votes purged", idea_id=idea_id, removed=removed)
            return removed
