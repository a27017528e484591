"""JWT token utilities.

Tokens are issued by the external login service. The board only needs the
`sub` claim; every other claim is ignored.
"""

from typing import Sequence

import jwt
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from board.domain.value.types import MAX_IDENTITY_LENGTH


class TokenClaims(BaseModel):
    """The part of a token payload the board cares about."""

    model_config = ConfigDict(extra="ignore")

    # Bounded like the identity it becomes
    sub: str = Field(min_length=1, max_length=MAX_IDENTITY_LENGTH)


class InvalidTokenError(Exception):
    """Malformed, tampered with, or expired token."""

    pass


def decode_token(
    token: str,
    secret: str | None = None,
    algorithms: Sequence[str] = ("HS256",),
) -> TokenClaims:
    """Decode a token and extract its claims.

    Pure function: everything it needs is passed in. With a secret the
    signature and expiry are verified; without one the payload is only
    Base64URL-decoded and JSON-parsed.

    Args:
        token: Encoded JWT
        secret: Signing secret, or None to skip verification
        algorithms: Accepted signing algorithms

    Returns:
        Token claims

    Raises:
        InvalidTokenError: If the token is malformed, invalid, expired or
            carries no usable subject
    """
    if token.count(".") != 2:
        raise InvalidTokenError("Malformed token")

    try:
        if secret is None:
            payload = jwt.decode(token, options={"verify_signature": False})
        else:
            payload = jwt.decode(token, secret, algorithms=list(algorithms))
    except jwt.ExpiredSignatureError:
        raise InvalidTokenError("Token has expired")
    except jwt.InvalidTokenError:
        raise InvalidTokenError("Invalid token")

    try:
        return TokenClaims.model_validate(payload)
    except PydanticValidationError:
        raise InvalidTokenError("Token subject is missing or invalid")
