"""Authorization header parsing."""

from fastapi import Header

TOKEN_SCHEMES = ("token", "bearer")


def parse_authorization(header: str | None) -> str | None:
    """Extract the JWT from an ``Authorization`` header value.

    Accepts ``Token <jwt>`` and ``Bearer <jwt>``. Anything else counts
    as no token at all.

    Args:
        header: Raw header value, or None if absent

    Returns:
        The token, or None
    """
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() not in TOKEN_SCHEMES or not token.strip():
        return None
    return token.strip()


async def session_token(authorization: str | None = Header(default=None)) -> str | None:
    """FastAPI dependency yielding the session token, if one was sent."""
    return parse_authorization(authorization)
