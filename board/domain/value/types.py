"""Domain value objects for the idea board.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from board.domain.value.common import ValueObject

# Longest subject or fingerprint the voter columns can hold
MAX_IDENTITY_LENGTH = 255


class VoterKind(str, Enum):
    """Discriminator for voter identities."""

    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


class AuthenticatedVoter(ValueObject):
    """Voter identified by the `sub` claim of a session token."""

    kind: Literal["authenticated"] = "authenticated"
    subject: str = Field(min_length=1, max_length=MAX_IDENTITY_LENGTH)

    @property
    def value(self) -> str:
        return self.subject

    def __str__(self) -> str:
        return f"user:{self.subject}"


class AnonymousVoter(ValueObject):
    """Voter identified by a fingerprint persisted in client storage."""

    kind: Literal["anonymous"] = "anonymous"
    fingerprint: str = Field(min_length=1, max_length=MAX_IDENTITY_LENGTH)

    @property
    def value(self) -> str:
        return self.fingerprint

    def __str__(self) -> str:
        return f"anon:{self.fingerprint}"


VoterIdentity = Annotated[
    Union[AuthenticatedVoter, AnonymousVoter], Field(discriminator="kind")
]


def voter_from_parts(
    kind: VoterKind | str, value: str
) -> AuthenticatedVoter | AnonymousVoter:
    """Rebuild a voter identity from its stored (kind, value) pair."""
    if VoterKind(kind) == VoterKind.AUTHENTICATED:
        return AuthenticatedVoter(subject=value)
    return AnonymousVoter(fingerprint=value)


class RankingMode(str, Enum):
    """Ordering applied to the idea list.

    Popular is the initial tab of the board.
    """

    POPULAR = "popular"  # vote_count DESC, then Recent
    RECENT = "recent"  # created_at DESC, newest insertion first on ties


class VoteOutcome(ValueObject):
    """Result of a cast vote attempt.

    `accepted` is False when the voter had already voted; this is a normal
    outcome, not an error.
    """

    accepted: bool
    new_count: int = Field(ge=0)


class BoardStatistics(ValueObject):
    """Totals shown on the board's stats panel."""

    total_ideas: int = Field(ge=0)
    total_votes: int = Field(ge=0)
