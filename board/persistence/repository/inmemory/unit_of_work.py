"""In-memory unit of work for testing."""

from board.domain.repository.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory writes are visible immediately; only commits are counted."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1
