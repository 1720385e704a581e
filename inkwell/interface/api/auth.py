"""Request authentication helpers."""

from fastapi import Cookie, Header


def get_auth_token(
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> str | None:
    """Extract the JWT from the request.

    A bearer token in the Authorization header wins over the auth_token
    cookie set by the web client.

    Returns:
        Raw JWT string, or None if the request carries neither
    """
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token:
            return token.strip()
    return auth_token
