"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence, Set

from board.domain.model.vote import Vote
from board.domain.value import IdeaId, VoterIdentity


class VoteRepository(ABC):
    """Repository for Vote entity (the vote ledger).

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add_if_absent(self, vote: Vote) -> bool:
        """Record a vote unless the voter already voted on the idea.

        Must be a single atomic conditional insert keyed on
        (idea_id, voter) so that concurrent attempts record exactly one vote.

        Args:
            vote: The vote to record

        Returns:
            True if the vote was inserted, False if one already existed
        """
        pass

    @abstractmethod
    async def exists(self, idea_id: IdeaId, voter: VoterIdentity) -> bool:
        """Check whether a voter has voted on an idea.

        Args:
            idea_id: ID of the idea
            voter: The voter identity

        Returns:
            True if a vote is recorded
        """
        pass

    @abstractmethod
    async def find_voted_idea_ids(
        self,
        voter: VoterIdentity,
        idea_ids: Sequence[IdeaId],
    ) -> Set[IdeaId]:
        """Find which of the given ideas a voter has voted on (batch query).

        Args:
            voter: The voter identity
            idea_ids: Idea IDs to check

        Returns:
            The subset of idea_ids the voter has voted on
        """
        pass

    @abstractmethod
    async def count_by_idea(self, idea_id: IdeaId) -> int:
        """Count votes recorded for an idea.

        Args:
            idea_id: ID of the idea

        Returns:
            Number of distinct voters
        """
        pass

    @abstractmethod
    async def delete_by_idea(self, idea_id: IdeaId) -> int:
        """Delete all votes recorded for an idea.

        Used when an admin removes the idea itself.

        Args:
            idea_id: ID of the idea

        Returns:
            Number of votes deleted
        """
        pass
