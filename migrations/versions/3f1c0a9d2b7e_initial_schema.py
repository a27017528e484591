"""initial_schema

Create the schema of the idea board:
- Ideas (insertion-ordered integer IDs, cached vote count)
- Votes (one per idea and voter identity, upvote-only)

Revision ID: 3f1c0a9d2b7e
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # IDEAS table
    # ========================================================================
    op.create_table(
        "ideas",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "author_kind", sa.String(20), nullable=False
        ),  # 'authenticated', 'anonymous'
        sa.Column("author_value", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("vote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("vote_count >= 0", name="vote_count_non_negative"),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_ideas_created_at", "ideas", ["created_at"])
    op.create_index("idx_ideas_vote_count", "ideas", ["vote_count"])

    # ========================================================================
    # VOTES table (one vote per idea and voter)
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("idea_id", sa.Integer(), nullable=False),
        sa.Column("voter_kind", sa.String(20), nullable=False),
        sa.Column("voter_value", sa.String(255), nullable=False),
        sa.Column("cast_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["idea_id"], ["ideas.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "idea_id", "voter_kind", "voter_value", name="unique_vote"
        ),
    )
    op.create_index("idx_votes_voter", "votes", ["voter_kind", "voter_value"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_index("idx_votes_voter", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_ideas_vote_count", table_name="ideas")
    op.drop_index("idx_ideas_created_at", table_name="ideas")
    op.drop_table("ideas")
