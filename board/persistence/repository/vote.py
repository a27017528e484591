"""SQL implementation of Vote repository."""

from typing import Sequence, Set

import logfire
from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import IdeaNotFoundError
from board.domain.model import Vote
from board.domain.repository import VoteRepository
from board.domain.value import IdeaId, VoterIdentity
from board.persistence.mappers import vote_to_dict
from board.persistence.tables import votes_table

# Columns of the unique_vote constraint
_UNIQUE_VOTE_COLUMNS = ["idea_id", "voter_kind", "voter_value"]


class SqlVoteRepository(VoteRepository):
    """SQLAlchemy Core implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _voter_clause(self, voter: VoterIdentity):
        return and_(
            votes_table.c.voter_kind == voter.kind,
            votes_table.c.voter_value == voter.value,
        )

    async def add_if_absent(self, vote: Vote) -> bool:
        """Insert a vote unless (idea_id, voter) already exists.

        Uses INSERT ... ON CONFLICT DO NOTHING RETURNING so the check and the
        insert are one statement; concurrent inserts for the same key wait
        on the unique index and then do nothing.

        The insert is the first write of a vote, so when the idea vanished
        under it (foreign key violation) the transaction is rolled back
        whole and the caller sees IdeaNotFoundError.
        """
        dialect = self.session.get_bind().dialect.name
        dialect_insert = sqlite.insert if dialect == "sqlite" else postgresql.insert

        stmt = (
            dialect_insert(votes_table)
            .values(**vote_to_dict(vote))
            .on_conflict_do_nothing(index_elements=_UNIQUE_VOTE_COLUMNS)
            .returning(votes_table.c.id)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            await self.session.rollback()
            logfire.warn(
                "Vote on idea deleted concurrently", idea_id=vote.idea_id, error=str(e)
            )
            raise IdeaNotFoundError(vote.idea_id)
        inserted = result.scalar_one_or_none() is not None
        await self.session.flush()
        return inserted

    async def exists(self, idea_id: IdeaId, voter: VoterIdentity) -> bool:
        """Check whether a voter has voted on an idea."""
        stmt = select(votes_table.c.id).where(
            and_(votes_table.c.idea_id == idea_id, self._voter_clause(voter))
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_voted_idea_ids(
        self,
        voter: VoterIdentity,
        idea_ids: Sequence[IdeaId],
    ) -> Set[IdeaId]:
        """Find which of the given ideas a voter has voted on (batch query)."""
        if not idea_ids:
            return set()

        stmt = select(votes_table.c.idea_id).where(
            and_(
                self._voter_clause(voter),
                votes_table.c.idea_id.in_(idea_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {IdeaId(row.idea_id) for row in result.fetchall()}

    async def count_by_idea(self, idea_id: IdeaId) -> int:
        """Count votes for an idea."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.idea_id == idea_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def delete_by_idea(self, idea_id: IdeaId) -> int:
        """Delete all votes for an idea."""
        stmt = delete(votes_table).where(votes_table.c.idea_id == idea_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
