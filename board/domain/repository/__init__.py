"""Repository interfaces for the idea board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from board.domain.repository.fingerprint import FingerprintStore
from board.domain.repository.idea import IdeaRepository
from board.domain.repository.unit_of_work import UnitOfWork
from board.domain.repository.vote import VoteRepository

__all__ = [
    "FingerprintStore",
    "IdeaRepository",
    "UnitOfWork",
    "VoteRepository",
]
