"""Unit of work port.

Repositories of one request share a transaction. Use cases commit it
before they report a result, so a response never describes writes that
could still be lost.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Commit boundary for the repositories of one request."""

    @abstractmethod
    async def commit(self) -> None:
        """Make every write of the current transaction durable.

        Raises:
            Exception: Driver errors propagate; nothing was committed
        """
        pass
