"""Unit tests for request context assembly."""

from fastapi import Request, Response

from board.config import Settings
from board.interface.api.context import (
    CookieFingerprintStore,
    build_request_context,
    extract_auth_token,
)


def make_request(headers: dict[str, str] | None = None) -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/ideas",
            "query_string": b"",
            "headers": [
                (name.lower().encode(), value.encode())
                for name, value in (headers or {}).items()
            ],
        }
    )


class TestExtractAuthToken:
    def test_bearer_header(self):
        request = make_request({"Authorization": "Bearer abc.def.ghi"})

        assert extract_auth_token(request, "auth_token") == "abc.def.ghi"

    def test_header_wins_over_cookie(self):
        request = make_request(
            {"Authorization": "bearer from.header.x", "Cookie": "auth_token=from.cookie.x"}
        )

        assert extract_auth_token(request, "auth_token") == "from.header.x"

    def test_cookie_fallback(self):
        request = make_request({"Cookie": "auth_token=from.cookie.x"})

        assert extract_auth_token(request, "auth_token") == "from.cookie.x"

    def test_non_bearer_scheme_is_ignored(self):
        request = make_request({"Authorization": "Basic dXNlcjpwYXNz"})

        assert extract_auth_token(request, "auth_token") is None

    def test_no_token(self):
        assert extract_auth_token(make_request(), "auth_token") is None


class TestCookieFingerprintStore:
    def test_reads_request_cookie(self):
        store = CookieFingerprintStore(
            make_request({"Cookie": "voter_id=voter_1_abcdefghi"}), Response(), 60
        )

        assert store.get("voter_id") == "voter_1_abcdefghi"
        assert store.get("other") is None

    def test_write_sets_long_lived_cookie_and_is_readable(self):
        response = Response()
        store = CookieFingerprintStore(make_request(), response, 3600)

        store.set("voter_id", "voter_2_abcdefghi")

        assert store.get("voter_id") == "voter_2_abcdefghi"
        cookie = response.headers["set-cookie"]
        assert "voter_id=voter_2_abcdefghi" in cookie
        assert "Max-Age=3600" in cookie
        assert "HttpOnly" in cookie


class TestBuildRequestContext:
    def test_assembles_token_and_cookie_store(self):
        settings = Settings()
        request = make_request({"Authorization": "Bearer a.b.c"})

        context = build_request_context(request, Response(), settings)

        assert context.auth_token == "a.b.c"
        assert isinstance(context.fingerprint_store, CookieFingerprintStore)
        assert context.fingerprint_store.max_age == 3650 * 24 * 60 * 60
