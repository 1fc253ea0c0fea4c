# storefront/api/deps.py
from fastapi import Header, Request

from storefront.domain.errors import Unauthorized
from storefront.utils.security import decode_access_token


def require_auth(request: Request, authorization: str | None = Header(None)) -> dict:
    """Bearer token z naglowka Authorization, zwraca claims."""
    if not authorization:
        raise Unauthorized("Missing bearer token")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise Unauthorized("Invalid authentication credentials")

    payload = decode_access_token(token)
    request.state.user_id = payload.get("sub")
    return payload
