"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from board.config import Settings
from board.domain.repository import IdeaRepository, UnitOfWork, VoteRepository
from board.persistence.database import create_engine, create_session_factory
from board.persistence.repository import (
    SqlIdeaRepository,
    SqlUnitOfWork,
    SqlVoteRepository,
)
from board.util.di.base import ProviderBase
from board.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using SQLAlchemy."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Use cases commit through UnitOfWork before responding. Anything left
        pending is committed when the scope closes, or rolled back if an
        exception was raised. A vote insert and its count increment share
        one transaction.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_idea_repository(self, session: AsyncSession) -> IdeaRepository:
        """Provide Idea repository."""
        return SqlIdeaRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return SqlVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide the request's unit of work."""
        return SqlUnitOfWork(session)
