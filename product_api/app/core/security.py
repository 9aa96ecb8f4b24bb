"""
Authentication gate for mutating endpoints.

Create, update and delete require an ``Authorization`` header that
starts with the literal prefix ``"Bearer "``.  The token itself is not
verified: any value carrying the prefix is accepted.  The gate is a
FastAPI dependency, so it runs before the endpoint reads the request
body.  An unauthenticated request therefore never reaches validation
and never mutates the store.
"""

from typing import Optional

from fastapi import Security
from fastapi.security import APIKeyHeader

from .errors import UnauthorizedError

BEARER_PREFIX = "Bearer "

# ``auto_error=False`` lets us answer with our own 401 body instead of
# FastAPI's default 403.
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def require_bearer(authorization: Optional[str] = Security(authorization_header)) -> str:
    """Dependency that enforces a bearer-shaped ``Authorization`` header.

    Returns the token part of the header (possibly empty).  Raises
    ``UnauthorizedError`` when the header is missing or does not start
    with ``"Bearer "``.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("Please provide a valid authorization token")
    return authorization[len(BEARER_PREFIX):]
