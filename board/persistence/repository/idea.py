"""SQL implementation of Idea repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import IdeaNotFoundError
from board.domain.model import Idea
from board.domain.repository import IdeaRepository
from board.domain.value import IdeaId, VoterIdentity
from board.persistence.mappers import row_to_idea, voter_to_columns
from board.persistence.tables import ideas_table


class SqlIdeaRepository(IdeaRepository):
    """SQLAlchemy Core implementation of IdeaRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, idea_id: IdeaId) -> Optional[Idea]:
        """Find an idea by ID."""
        stmt = select(ideas_table).where(ideas_table.c.id == idea_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_idea(row._asdict()) if row else None

    async def find_all(self) -> List[Idea]:
        """Return every idea."""
        result = await self.session.execute(select(ideas_table))
        return [row_to_idea(row._asdict()) for row in result.fetchall()]

    async def add(
        self,
        title: str,
        description: str,
        author: VoterIdentity,
        created_at: datetime,
    ) -> Idea:
        """Insert an idea; the database assigns the ID."""
        stmt = (
            insert(ideas_table)
            .values(
                title=title,
                description=description,
                created_at=created_at,
                vote_count=0,
                **voter_to_columns(author, "author"),
            )
            .returning(ideas_table.c.id)
        )
        result = await self.session.execute(stmt)
        idea_id = result.scalar_one()
        await self.session.flush()

        return Idea(
            id=IdeaId(idea_id),
            title=title,
            description=description,
            author=author,
            created_at=created_at,
            vote_count=0,
        )

    async def increment_vote_count(self, idea_id: IdeaId) -> int:
        """Atomically increment the vote count by 1."""
        stmt = (
            update(ideas_table)
            .where(ideas_table.c.id == idea_id)
            .values(vote_count=ideas_table.c.vote_count + 1)
            .returning(ideas_table.c.vote_count)
        )
        result = await self.session.execute(stmt)
        new_count = result.scalar_one_or_none()
        await self.session.flush()

        if new_count is None:
            raise IdeaNotFoundError(idea_id)
        return new_count

    async def delete(self, idea_id: IdeaId) -> bool:
        """Delete an idea."""
        stmt = delete(ideas_table).where(ideas_table.c.id == idea_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count(self) -> int:
        """Count ideas."""
        stmt = select(func.count()).select_from(ideas_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def sum_vote_counts(self) -> int:
        """Sum vote counts over all ideas."""
        stmt = select(func.coalesce(func.sum(ideas_table.c.vote_count), 0))
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
