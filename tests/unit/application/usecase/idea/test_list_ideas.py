"""Unit tests for ListIdeasUseCase and GetIdeaUseCase."""

import pytest

from board.application.context import RequestContext
from board.application.usecase.idea import (
    GetIdeaRequest,
    GetIdeaUseCase,
    ListIdeasRequest,
    ListIdeasUseCase,
)
from board.domain.error import IdeaNotFoundError
from board.domain.service import IdeaService, VoteService
from board.domain.value import AnonymousVoter, RankingMode
from board.persistence.repository.inmemory import InMemoryFingerprintStore
from tests.factories import user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

FINGERPRINT = "voter_1700000000000_abcdefghi"


def context() -> RequestContext:
    return RequestContext(
        auth_token=None,
        fingerprint_store=InMemoryFingerprintStore({"voter_id": FINGERPRINT}),
    )


async def _seed(env):
    """Two ideas; the older one gets more votes, one of them from the caller."""
    idea_service = await env.get(IdeaService)
    vote_service = await env.get(VoteService)
    older = await idea_service.create_idea("Dark mode", "Easier on the eyes", user())
    newer = await idea_service.create_idea("Export CSV", "For reports", user())
    await vote_service.cast_vote(older.id, AnonymousVoter(fingerprint=FINGERPRINT))
    await vote_service.cast_vote(older.id, user("bob"))
    return older, newer


class TestListIdeasUseCase:
    """Tests for the list ideas flow."""

    @pytest.mark.asyncio
    async def test_defaults_to_popular(self, unit_env):
        older, newer = await _seed(unit_env)
        use_case = await unit_env.get(ListIdeasUseCase)

        response = await use_case.execute(ListIdeasRequest(context=context()))

        assert response.sort == RankingMode.POPULAR
        assert [item.idea_id for item in response.ideas] == [older.id, newer.id]
        assert response.total == 2

    @pytest.mark.asyncio
    async def test_recent_order_and_has_voted_flags(self, unit_env):
        older, newer = await _seed(unit_env)
        use_case = await unit_env.get(ListIdeasUseCase)

        response = await use_case.execute(
            ListIdeasRequest(sort=RankingMode.RECENT, context=context())
        )

        assert [item.idea_id for item in response.ideas] == [newer.id, older.id]
        assert {item.idea_id: item.has_voted for item in response.ideas} == {
            older.id: True,
            newer.id: False,
        }

    @pytest.mark.asyncio
    async def test_search_then_clear(self, unit_env):
        await _seed(unit_env)
        use_case = await unit_env.get(ListIdeasUseCase)

        missing = await use_case.execute(
            ListIdeasRequest(query="zzzznonexistent", context=context())
        )
        found = await use_case.execute(
            ListIdeasRequest(query="REPORTS", context=context())
        )
        cleared = await use_case.execute(ListIdeasRequest(query="", context=context()))

        assert missing.ideas == []
        assert [item.title for item in found.ideas] == ["Export CSV"]
        assert len(cleared.ideas) == 2


class TestGetIdeaUseCase:
    """Tests for the get idea flow."""

    @pytest.mark.asyncio
    async def test_returns_idea_with_vote_flag(self, unit_env):
        older, _ = await _seed(unit_env)
        use_case = await unit_env.get(GetIdeaUseCase)

        response = await use_case.execute(
            GetIdeaRequest(idea_id=older.id, context=context())
        )

        assert response.idea.title == "Dark mode"
        assert response.idea.vote_count == 2
        assert response.idea.has_voted is True

    @pytest.mark.asyncio
    async def test_missing_idea_raises(self, unit_env):
        use_case = await unit_env.get(GetIdeaUseCase)

        with pytest.raises(IdeaNotFoundError):
            await use_case.execute(GetIdeaRequest(idea_id=7, context=context()))
