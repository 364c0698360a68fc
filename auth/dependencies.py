"""
auth/dependencies.py -- FastAPI Depends() helper that gates protected routes.

Clients authenticate with an `Authorization: Bearer <token>` header carrying
the JWT returned by POST /login. Tokens are stateless: the gate verifies the
signature and expiry and does not consult the user store.

Failure messages follow the public API contract:
  - no header, or a header with no token segment -> "Access denied. No token provided"
  - wrong scheme, bad signature, malformed, expired -> "Invalid token"

Both are raised as core.errors.Unauthenticated and rendered as 401 by the
MarketError handler in api/main.py.

Layer rule: no imports from api/ or catalog/.
  auth/dependencies.py may import from fastapi (for Request) because this
  module is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from fastapi import Request

from auth.tokens import decode_access_token
from core.errors import InvalidToken, Unauthenticated


def get_current_user_id(request: Request) -> int:
    """Require a valid Bearer token; return the authenticated user id.

    On success the id is also stored on request.state.user_id so middleware
    and handlers further down the chain can read the caller's identity.

    Use as a FastAPI dependency:
        @router.post("/protected")
        def route(user_id: int = Depends(get_current_user_id)): ...
    """
    parts = request.headers.get("Authorization", "").split()
    if len(parts) < 2:
        raise Unauthenticated()

    scheme, token = parts[0], parts[1]
    if scheme.lower() != "bearer":
        raise Unauthenticated(InvalidToken.message)

    try:
        user_id = decode_access_token(token)
    except InvalidToken as exc:
        raise Unauthenticated(InvalidToken.message) from exc

    request.state.user_id = user_id
    return user_id
