"""Strongly typed identifiers for idea board entities.

Idea IDs are integers assigned by the store in insertion order, which makes
them usable as the final tie-break of the ranking comparators.
"""

from typing import NewType
from uuid import UUID

IdeaId = NewType("IdeaId", int)
VoteId = NewType("VoteId", UUID)
