"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from board.domain.model import Idea, Vote
from board.domain.value import IdeaId, VoterIdentity, voter_from_parts


def _aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything we store is UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def voter_to_columns(voter: VoterIdentity, prefix: str) -> Dict[str, Any]:
    """Split a voter identity into its (kind, value) column pair.

    Args:
        voter: Voter identity
        prefix: Column prefix, "author" or "voter"

    Returns:
        Dict with `<prefix>_kind` and `<prefix>_value`
    """
    return {f"{prefix}_kind": voter.kind, f"{prefix}_value": voter.value}


def row_to_idea(row: Dict[str, Any]) -> Idea:
    """Convert database row to Idea domain model.

    Args:
        row: Database row as dict

    Returns:
        Idea domain model
    """
    return Idea(
        id=IdeaId(row["id"]),
        title=row["title"],
        description=row["description"],
        author=voter_from_parts(row["author_kind"], row["author_value"]),
        created_at=_aware(row["created_at"]),
        vote_count=row["vote_count"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": vote.id,
        "idea_id": vote.idea_id,
        **voter_to_columns(vote.voter, "voter"),
        "cast_at": vote.cast_at,
    }
