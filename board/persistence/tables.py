"""SQLAlchemy table definitions for the idea board.

They match the schema defined in Alembic migrations. Column types are the
generic SQLAlchemy ones so the same tables run on PostgreSQL and SQLite.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    Uuid,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# IDEAS TABLE
# ============================================================================
ideas_table = Table(
    "ideas",
    metadata,
    # Insertion-ordered ID, also the tiebreak for equal created_at
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("author_kind", String(20), nullable=False),  # 'authenticated', 'anonymous'
    Column("author_value", String(255), nullable=False),  # sub claim or fingerprint
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("vote_count", Integer, nullable=False, server_default="0"),
    CheckConstraint("vote_count >= 0", name="vote_count_non_negative"),
    sqlite_autoincrement=True,  # Never reuse IDs of deleted ideas
)

Index("idx_ideas_created_at", ideas_table.c.created_at)
Index("idx_ideas_vote_count", ideas_table.c.vote_count)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "idea_id", Integer, ForeignKey("ideas.id", ondelete="CASCADE"), nullable=False
    ),
    Column("voter_kind", String(20), nullable=False),
    Column("voter_value", String(255), nullable=False),
    Column("cast_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("idea_id", "voter_kind", "voter_value", name="unique_vote"),
)

Index("idx_votes_voter", votes_table.c.voter_kind, votes_table.c.voter_value)
