"""In-memory repository implementations for testing."""

from .fingerprint import InMemoryFingerprintStore
from .idea import InMemoryIdeaRepository
from .unit_of_work import InMemoryUnitOfWork
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryFingerprintStore",
    "InMemoryIdeaRepository",
    "InMemoryUnitOfWork",
    "InMemoryVoteRepository",
]
