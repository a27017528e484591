"""Build the per-request context from HTTP headers and cookies."""

from typing import Optional

from fastapi import Request, Response

from board.application.context import RequestContext
from board.config import Settings
from board.domain.repository import FingerprintStore

_BEARER_PREFIX = "bearer "


class CookieFingerprintStore(FingerprintStore):
    """Fingerprint storage backed by a long-lived browser cookie.

    Reads come from the incoming request; writes become a Set-Cookie header
    on the outgoing response and are visible to later reads in the same
    request.
    """

    def __init__(self, request: Request, response: Response, max_age: int) -> None:
        self.request = request
        self.response = response
        self.max_age = max_age
        self._written: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        if key in self._written:
            return self._written[key]
        return self.request.cookies.get(key)

    def set(self, key: str, value: str) -> None:
        self._written[key] = value
        self.response.set_cookie(
            key=key,
            value=value,
            max_age=self.max_age,
            httponly=True,
            samesite="lax",
        )


def extract_auth_token(request: Request, cookie_name: str) -> str | None:
    """Token from the Authorization header, else from the session cookie.

    Args:
        request: Incoming request
        cookie_name: Name of the session cookie

    Returns:
        The raw token, or None if the request carries none
    """
    authorization = request.headers.get("authorization", "")
    if authorization.lower().startswith(_BEARER_PREFIX):
        token = authorization[len(_BEARER_PREFIX) :].strip()
        if token:
            return token

    return request.cookies.get(cookie_name) or None


def build_request_context(
    request: Request, response: Response, settings: Settings
) -> RequestContext:
    """Assemble the RequestContext handed to use cases.

    Args:
        request: Incoming request
        response: Outgoing response (receives the fingerprint cookie)
        settings: Application settings

    Returns:
        Request context
    """
    max_age = settings.board.fingerprint_max_age_days * 24 * 60 * 60
    return RequestContext(
        auth_token=extract_auth_token(request, settings.auth.token_cookie),
        fingerprint_store=CookieFingerprintStore(request, response, max_age),
    )
