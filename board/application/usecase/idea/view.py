"""Idea representation shared by the idea use cases."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.model import Idea
from board.domain.value import AuthenticatedVoter


class IdeaView(BaseModel):
    """Idea as shown on the board."""

    idea_id: int
    title: str
    description: str
    author: str | None  # Subject of the author, None when submitted anonymously
    created_at: datetime
    vote_count: int
    has_voted: bool = False

    @classmethod
    def from_idea(cls, idea: Idea, has_voted: bool = False) -> "IdeaView":
        # Fingerprints are never echoed back to other visitors
        author = (
            idea.author.subject if isinstance(idea.author, AuthenticatedVoter) else None
        )
        return cls(
            idea_id=idea.id,
            title=idea.title,
            description=idea.description,
            author=author,
            created_at=idea.created_at,
            vote_count=idea.vote_count,
            has_voted=has_voted,
        )
