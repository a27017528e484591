"""Idea aggregate root.

Ideas are the only content type on the board. Their vote count is a cache
of the vote ledger and is only ever changed through the ledger.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import IdeaId, VoterIdentity


class Idea(DomainModel):
    """Idea aggregate root.

    Business rules:
    - Title and description are non-empty after trimming
    - `vote_count` equals the number of distinct voters recorded for the idea
    - `id` grows with insertion order and breaks `created_at` ties
    """

    id: IdeaId
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    author: VoterIdentity
    created_at: datetime
    vote_count: int = Field(default=0, ge=0)
