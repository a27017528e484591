"""Unit tests for IdentityService."""

import re
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from board.config import AuthSettings, BoardSettings
from board.domain.service import IdentityService, generate_fingerprint
from board.domain.value import AnonymousVoter, AuthenticatedVoter
from board.persistence.repository.inmemory import InMemoryFingerprintStore
from tests.factories import ADMIN_SUBJECT, TEST_JWT_SECRET, make_token

FINGERPRINT_PATTERN = re.compile(r"^voter_\d+_[0-9a-z]{9}$")


@pytest.fixture
def identity_service(auth_settings, board_settings) -> IdentityService:
    return IdentityService(auth_settings=auth_settings, board_settings=board_settings)


class TestGenerateFingerprint:
    """Tests for fingerprint generation."""

    def test_format(self):
        assert FINGERPRINT_PATTERN.match(generate_fingerprint())

    def test_fingerprints_are_unique(self):
        assert len({generate_fingerprint() for _ in range(100)}) == 100


class TestResolveAuthenticated:
    """Tokens resolve to authenticated identities."""

    def test_valid_token_yields_subject(self, identity_service):
        store = InMemoryFingerprintStore()

        identity = identity_service.resolve(make_token("alice"), store)

        assert identity == AuthenticatedVoter(subject="alice")
        # Authenticated resolution never touches client storage
        assert store.writes == 0

    def test_extra_claims_are_ignored(self, identity_service):
        token = make_token("alice", name="Alice", role="member")

        identity = identity_service.resolve(token, InMemoryFingerprintStore())

        assert identity == AuthenticatedVoter(subject="alice")

    @pytest.mark.parametrize(
        "token",
        [
            "not-a-jwt",
            "only.two",
            "a.b.c.d",
            "!!!.@@@.###",
            "eyJhbGciOiJIUzI1NiJ9.bm90IGpzb24.sig",
        ],
    )
    def test_malformed_token_falls_back_to_anonymous(self, identity_service, token):
        store = InMemoryFingerprintStore()

        identity = identity_service.resolve(token, store)

        assert isinstance(identity, AnonymousVoter)
        assert store.values["voter_id"] == identity.fingerprint

    def test_token_with_wrong_signature_falls_back(self, identity_service):
        token = make_token("mallory", secret="another-secret-that-is-32-bytes-long!!")

        identity = identity_service.resolve(token, InMemoryFingerprintStore())

        assert isinstance(identity, AnonymousVoter)

    def test_expired_token_falls_back(self, identity_service):
        token = jwt.encode(
            {"sub": "alice", "exp": datetime.now(timezone.utc) - timedelta(hours=1)},
            TEST_JWT_SECRET,
            algorithm="HS256",
        )

        identity = identity_service.resolve(token, InMemoryFingerprintStore())

        assert isinstance(identity, AnonymousVoter)

    def test_token_without_subject_falls_back(self, identity_service):
        token = jwt.encode({"name": "nobody"}, TEST_JWT_SECRET, algorithm="HS256")

        identity = identity_service.resolve(token, InMemoryFingerprintStore())

        assert isinstance(identity, AnonymousVoter)

    def test_overlong_subject_falls_back(self, identity_service):
        store = InMemoryFingerprintStore()

        identity = identity_service.resolve(make_token("u" * 300), store)

        assert isinstance(identity, AnonymousVoter)
        assert store.values["voter_id"] == identity.fingerprint

    def test_unverified_mode_reads_sub_of_any_signature(self, board_settings):
        service = IdentityService(
            auth_settings=AuthSettings(
                jwt_secret=TEST_JWT_SECRET, verify_signature=False
            ),
            board_settings=board_settings,
        )
        token = make_token("bob", secret="gateway-secret-unknown-to-us-0123456789")

        identity = service.resolve(token, InMemoryFingerprintStore())

        assert identity == AuthenticatedVoter(subject="bob")


class TestResolveAnonymous:
    """Anonymous identities come from client storage."""

    def test_first_visit_creates_and_persists_fingerprint(self, identity_service):
        store = InMemoryFingerprintStore()

        identity = identity_service.resolve(None, store)

        assert isinstance(identity, AnonymousVoter)
        assert FINGERPRINT_PATTERN.match(identity.fingerprint)
        assert store.values == {"voter_id": identity.fingerprint}
        assert store.writes == 1

    def test_existing_fingerprint_is_reused_without_writing(self, identity_service):
        store = InMemoryFingerprintStore({"voter_id": "voter_1_abcdefghi"})

        first = identity_service.resolve(None, store)
        second = identity_service.resolve("", store)

        assert first == second == AnonymousVoter(fingerprint="voter_1_abcdefghi")
        assert store.writes == 0

    def test_overlong_stored_fingerprint_is_replaced(self, identity_service):
        store = InMemoryFingerprintStore({"voter_id": "v" * 300})

        first = identity_service.resolve(None, store)
        second = identity_service.resolve(None, store)

        assert FINGERPRINT_PATTERN.match(first.fingerprint)
        assert store.values == {"voter_id": first.fingerprint}
        assert store.writes == 1
        assert second == first

    def test_resolution_is_stable_across_calls(self, identity_service):
        store = InMemoryFingerprintStore()

        identities = {identity_service.resolve(None, store) for _ in range(3)}

        assert len(identities) == 1
        assert store.writes == 1

    def test_unavailable_storage_degrades_to_session_identity(self, identity_service):
        store = InMemoryFingerprintStore(available=False)

        identity = identity_service.resolve(None, store)

        assert isinstance(identity, AnonymousVoter)
        assert FINGERPRINT_PATTERN.match(identity.fingerprint)
        assert store.values == {}

    def test_custom_storage_key(self, auth_settings):
        service = IdentityService(
            auth_settings=auth_settings,
            board_settings=BoardSettings(fingerprint_key="fp"),
        )
        store = InMemoryFingerprintStore()

        identity = service.resolve(None, store)

        assert store.values == {"fp": identity.fingerprint}


class TestIsAdmin:
    """Tests for the admin capability check."""

    def test_listed_subject_is_admin(self, identity_service):
        assert identity_service.is_admin(AuthenticatedVoter(subject=ADMIN_SUBJECT))

    def test_other_subject_is_not_admin(self, identity_service):
        assert not identity_service.is_admin(AuthenticatedVoter(subject="alice"))

    def test_anonymous_is_never_admin(self, identity_service):
        # Even a fingerprint that happens to equal an admin subject
        assert not identity_service.is_admin(AnonymousVoter(fingerprint=ADMIN_SUBJECT))
