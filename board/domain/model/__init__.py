"""Domain model entities for the idea board."""

from board.domain.model.idea import Idea
from board.domain.model.vote import Vote

__all__ = [
    "Idea",
    "Vote",
]
