"""SQL implementation of the unit of work."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.repository import UnitOfWork


class SqlUnitOfWork(UnitOfWork):
    """Commits the request's AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
        logfire.debug("Unit of work committed")
