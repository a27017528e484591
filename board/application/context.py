"""Per-request context handed to use cases."""

from pydantic import BaseModel, ConfigDict

from board.domain.repository import FingerprintStore


class RequestContext(BaseModel):
    """What a request knows about its caller.

    The identity is resolved from these by the use case, never by the route.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    auth_token: str | None = None
    fingerprint_store: FingerprintStore
