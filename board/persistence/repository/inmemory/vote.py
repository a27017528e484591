"""In-memory vote repository for testing."""

import threading
from typing import Sequence

from board.domain.model.vote import Vote
from board.domain.repository.vote import VoteRepository
from board.domain.value import IdeaId, VoterIdentity


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (idea_id, voter), mirroring the unique_vote constraint.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[IdeaId, str, str], Vote] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _key(idea_id: IdeaId, voter: VoterIdentity) -> tuple[IdeaId, str, str]:
        return (idea_id, voter.kind, voter.value)

    async def add_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless (idea_id, voter) already exists."""
        key = self._key(vote.idea_id, vote.voter)
        with self._lock:
            if key in self._votes:
                return False
            self._votes[key] = vote
            return True

    async def exists(self, idea_id: IdeaId, voter: VoterIdentity) -> bool:
        """Check whether a voter has voted on an idea."""
        return self._key(idea_id, voter) in self._votes

    async def find_voted_idea_ids(
        self,
        voter: VoterIdentity,
        idea_ids: Sequence[IdeaId],
    ) -> set[IdeaId]:
        """Find which of the given ideas a voter has voted on (batch query)."""
        return {
            idea_id for idea_id in idea_ids if self._key(idea_id, voter) in self._votes
        }

    async def count_by_idea(self, idea_id: IdeaId) -> int:
        """Count votes for an idea."""
        return sum(1 for key in self._votes if key[0] == idea_id)

    async def delete_by_idea(self, idea_id: IdeaId) -> int:
        """Delete all votes for an idea."""
        with self._lock:
            keys = [key for key in self._votes if key[0] == idea_id]
            for key in keys:
                del self._votes[key]
            return len(keys)
