"""In-memory idea repository for testing."""

import itertools
import threading
from datetime import datetime
from typing import Optional

from board.domain.error import IdeaNotFoundError
from board.domain.model.idea import Idea
from board.domain.repository.idea import IdeaRepository
from board.domain.value import IdeaId, VoterIdentity


class InMemoryIdeaRepository(IdeaRepository):
    """In-memory implementation of IdeaRepository for testing."""

    def __init__(self) -> None:
        self._ideas: dict[IdeaId, Idea] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    async def find_by_id(self, idea_id: IdeaId) -> Optional[Idea]:
        """Find an idea by ID."""
        return self._ideas.get(idea_id)

    async def find_all(self) -> list[Idea]:
        """Return every idea."""
        return list(self._ideas.values())

    async def add(
        self,
        title: str,
        description: str,
        author: VoterIdentity,
        created_at: datetime,
    ) -> Idea:
        """Insert an idea with the next ID."""
        with self._lock:
            idea = Idea(
                id=IdeaId(next(self._ids)),
                title=title,
                description=description,
                author=author,
                created_at=created_at,
                vote_count=0,
            )
            self._ideas[idea.id] = idea
            return idea

    async def increment_vote_count(self, idea_id: IdeaId) -> int:
        """Atomically increment the vote count by 1."""
        with self._lock:
            idea = self._ideas.get(idea_id)
            if idea is None:
                raise IdeaNotFoundError(idea_id)
            # Ideas are immutable, store an updated copy
            updated = idea.model_copy(update={"vote_count": idea.vote_count + 1})
            self._ideas[idea_id] = updated
            return updated.vote_count

    async def delete(self, idea_id: IdeaId) -> bool:
        """Delete an idea."""
        with self._lock:
            return self._ideas.pop(idea_id, None) is not None

    async def count(self) -> int:
        """Count ideas."""
        return len(self._ideas)

    async def sum_vote_counts(self) -> int:
        """Sum vote counts over all ideas."""
        return sum(idea.vote_count for idea in self._ideas.values())
