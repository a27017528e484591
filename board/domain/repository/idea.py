"""Idea repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from board.domain.model.idea import Idea
from board.domain.value import IdeaId, VoterIdentity


class IdeaRepository(ABC):
    """Repository for Idea aggregate.

    Defines the contract for idea persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, idea_id: IdeaId) -> Optional[Idea]:
        """Find an idea by ID.

        Args:
            idea_id: The idea's unique identifier

        Returns:
            The idea if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Idea]:
        """Return every idea, in no particular order.

        Ordering is the ranking engine's job, not the store's.

        Returns:
            All ideas on the board
        """
        pass

    @abstractmethod
    async def add(
        self,
        title: str,
        description: str,
        author: VoterIdentity,
        created_at: datetime,
    ) -> Idea:
        """Insert a new idea and assign its ID.

        IDs are assigned in insertion order.

        Args:
            title: Trimmed, non-empty title
            description: Trimmed, non-empty description
            author: Identity of the submitter
            created_at: Creation timestamp

        Returns:
            The stored idea with its ID and a vote count of 0
        """
        pass

    @abstractmethod
    async def increment_vote_count(self, idea_id: IdeaId) -> int:
        """Atomically increment the cached vote count by 1.

        Only the vote ledger calls this, right after recording a new vote.

        Args:
            idea_id: The idea ID

        Returns:
            The vote count after the increment

        Raises:
            IdeaNotFoundError: If the idea no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, idea_id: IdeaId) -> bool:
        """Delete an idea.

        Args:
            idea_id: The idea ID to delete

        Returns:
            True if an idea was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count ideas on the board."""
        pass

    @abstractmethod
    async def sum_vote_counts(self) -> int:
        """Sum of the vote counts of all ideas."""
        pass
