"""Voter identity domain service."""

import secrets
import string
import time

import logfire

from board.config import AuthSettings, BoardSettings
from board.domain.error import StorageUnavailableError
from board.domain.repository import FingerprintStore
from board.domain.value import (
    MAX_IDENTITY_LENGTH,
    AnonymousVoter,
    AuthenticatedVoter,
    VoterIdentity,
)
from board.util.jwt import InvalidTokenError, decode_token

from .base import Service

_BASE36 = string.digits + string.ascii_lowercase


def generate_fingerprint() -> str:
    """Generate a fresh anonymous voter fingerprint.

    Format: voter_<epoch millis>_<9 random base36 chars>
    """
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"voter_{time.time_ns() // 1_000_000}_{suffix}"


class IdentityService(Service):
    """Domain service resolving who is voting."""

    def __init__(self, auth_settings: AuthSettings, board_settings: BoardSettings) -> None:
        """Initialize identity service.

        Args:
            auth_settings: Authentication settings
            board_settings: Board settings (fingerprint storage key)
        """
        self.auth_settings = auth_settings
        self.board_settings = board_settings

    def resolve(
        self, auth_token: str | None, storage: FingerprintStore
    ) -> VoterIdentity:
        """Resolve the voter identity of a request.

        A valid token yields an authenticated identity. A missing or invalid
        token falls back to the anonymous fingerprint from client storage.

        Args:
            auth_token: Bearer token, if the request carried one
            storage: Client storage holding the fingerprint

        Returns:
            The voter identity
        """
        if auth_token:
            subject = self.get_subject_from_token(auth_token)
            if subject:
                return AuthenticatedVoter(subject=subject)

        return AnonymousVoter(fingerprint=self.resolve_fingerprint(storage))

    def get_subject_from_token(self, auth_token: str) -> str | None:
        """Extract the `sub` claim without raising.

        Args:
            auth_token: Encoded JWT

        Returns:
            The subject, or None if the token is invalid
        """
        secret = self.auth_settings.jwt_secret if self.auth_settings.verify_signature else None
        try:
            claims = decode_token(
                auth_token,
                secret=secret,
                algorithms=[self.auth_settings.jwt_algorithm],
            )
        except InvalidTokenError as e:
            # Invalid or expired token, treat as anonymous
            logfire.debug(
                "Token rejected, falling back to anonymous identity", error=str(e)
            )
            return None
        return claims.sub

    def resolve_fingerprint(self, storage: FingerprintStore) -> str:
        """Read the persisted fingerprint, creating it on first use.

        A stored value too long to be an identity is replaced. When storage
        is unavailable a fingerprint is generated without being persisted;
        that identity only lives as long as the current page.

        Args:
            storage: Client storage holding the fingerprint

        Returns:
            The fingerprint
        """
        key = self.board_settings.fingerprint_key

        try:
            existing = storage.get(key)
        except StorageUnavailableError as e:
            fingerprint = generate_fingerprint()
            logfire.warn(
                "Fingerprint storage unavailable, using session-scoped identity",
                error=str(e),
            )
            return fingerprint

        if existing and len(existing) <= MAX_IDENTITY_LENGTH:
            return existing
        if existing:
            # Tampered or foreign value: replace it like a missing one
            logfire.warn("Discarding unusable fingerprint", length=len(existing))

        fingerprint = generate_fingerprint()
        try:
            storage.set(key, fingerprint)
            logfire.info("Anonymous fingerprint created", fingerprint=fingerprint)
        except StorageUnavailableError as e:
            logfire.warn(
                "Could not persist fingerprint, using session-scoped identity",
                error=str(e),
            )
        return fingerprint

    def is_admin(self, identity: VoterIdentity) -> bool:
        """Check the admin capability of an identity.

        Args:
            identity: Resolved voter identity

        Returns:
            True if the identity is an authenticated admin subject
        """
        return (
            isinstance(identity, AuthenticatedVoter)
            and identity.subject in self.auth_settings.admin_subjects
        )
