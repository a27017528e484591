"""Vote entity.

Each identity (authenticated user or anonymous fingerprint) can cast one
vote per idea.
"""

from datetime import datetime

from board.domain.model.common import DomainModel
from board.domain.value import IdeaId, VoteId, VoterIdentity


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (idea, voter) pair (enforced by a unique constraint)
    - Upvotes only, and they are never withdrawn
    """

    id: VoteId
    idea_id: IdeaId
    voter: VoterIdentity
    cast_at: datetime
