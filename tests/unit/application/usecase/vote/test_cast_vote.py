"""Unit tests for CastVoteUseCase and GetVoteStatusUseCase."""

import pytest

from board.application.context import RequestContext
from board.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteStatusRequest,
    GetVoteStatusUseCase,
)
from board.domain.error import IdeaNotFoundError
from board.domain.repository import UnitOfWork
from board.domain.service import IdeaService
from board.persistence.repository.inmemory import InMemoryFingerprintStore
from tests.factories import make_token, user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def anonymous_context(store: InMemoryFingerprintStore | None = None) -> RequestContext:
    return RequestContext(
        auth_token=None, fingerprint_store=store or InMemoryFingerprintStore()
    )


class TestCastVoteUseCase:
    """Tests for the cast vote flow."""

    @pytest.mark.asyncio
    async def test_anonymous_vote_persists_fingerprint_and_repeat_is_noop(
        self, unit_env
    ):
        """First anonymous vote stores a fingerprint; voting again with it is a no-op."""
        # Arrange
        idea = await (await unit_env.get(IdeaService)).create_idea(
            "Dark mode", "Please", user("author")
        )
        use_case = await unit_env.get(CastVoteUseCase)
        store = InMemoryFingerprintStore()

        # Act
        first = await use_case.execute(
            CastVoteRequest(idea_id=idea.id, context=anonymous_context(store))
        )
        second = await use_case.execute(
            CastVoteRequest(idea_id=idea.id, context=anonymous_context(store))
        )

        # Assert
        assert "voter_id" in store.values
        assert store.writes == 1
        assert (first.accepted, first.new_count) == (True, 1)
        assert (second.accepted, second.new_count) == (False, 1)
        assert (await unit_env.get(UnitOfWork)).commits == 2

    @pytest.mark.asyncio
    async def test_new_browser_counts_as_new_voter(self, unit_env):
        idea = await (await unit_env.get(IdeaService)).create_idea(
            "Dark mode", "Please", user("author")
        )
        use_case = await unit_env.get(CastVoteUseCase)

        first = await use_case.execute(
            CastVoteRequest(idea_id=idea.id, context=anonymous_context())
        )
        second = await use_case.execute(
            CastVoteRequest(idea_id=idea.id, context=anonymous_context())
        )

        assert first.accepted and second.accepted
        assert second.new_count == 2

    @pytest.mark.asyncio
    async def test_authenticated_vote_uses_token_subject(self, unit_env):
        idea = await (await unit_env.get(IdeaService)).create_idea(
            "Dark mode", "Please", user("author")
        )
        use_case = await unit_env.get(CastVoteUseCase)
        token = make_token("bob")

        # Different browsers, same account
        first = await use_case.execute(
            CastVoteRequest(
                idea_id=idea.id,
                context=RequestContext(
                    auth_token=token, fingerprint_store=InMemoryFingerprintStore()
                ),
            )
        )
        second = await use_case.execute(
            CastVoteRequest(
                idea_id=idea.id,
                context=RequestContext(
                    auth_token=token, fingerprint_store=InMemoryFingerprintStore()
                ),
            )
        )

        assert first.accepted is True
        assert second.accepted is False

    @pytest.mark.asyncio
    async def test_vote_on_missing_idea_raises(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(IdeaNotFoundError):
            await use_case.execute(
                CastVoteRequest(idea_id=404, context=anonymous_context())
            )


class TestGetVoteStatusUseCase:
    """Tests for the vote status query."""

    @pytest.mark.asyncio
    async def test_reports_whether_caller_voted(self, unit_env):
        idea = await (await unit_env.get(IdeaService)).create_idea(
            "Dark mode", "Please", user("author")
        )
        cast_vote = await unit_env.get(CastVoteUseCase)
        vote_status = await unit_env.get(GetVoteStatusUseCase)
        store = InMemoryFingerprintStore()

        before = await vote_status.execute(
            GetVoteStatusRequest(idea_id=idea.id, context=anonymous_context(store))
        )
        await cast_vote.execute(
            CastVoteRequest(idea_id=idea.id, context=anonymous_context(store))
        )
        after = await vote_status.execute(
            GetVoteStatusRequest(idea_id=idea.id, context=anonymous_context(store))
        )

        assert before.has_voted is False
        assert after.has_voted is True

    @pytest.mark.asyncio
    async def test_missing_idea_raises(self, unit_env):
        vote_status = await unit_env.get(GetVoteStatusUseCase)

        with pytest.raises(IdeaNotFoundError):
            await vote_status.execute(
                GetVoteStatusRequest(idea_id=1, context=anonymous_context())
            )
