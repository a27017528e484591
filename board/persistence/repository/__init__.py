"""SQL repository implementations."""

from board.persistence.repository.idea import SqlIdeaRepository
from board.persistence.repository.unit_of_work import SqlUnitOfWork
from board.persistence.repository.vote import SqlVoteRepository

__all__ = [
    "SqlIdeaRepository",
    "SqlUnitOfWork",
    "SqlVoteRepository",
]
