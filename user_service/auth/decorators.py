"""Authentication decorators for protected endpoints.

- @auth_required - Requires a valid session token
"""

import logging
from functools import wraps

from flask import g, request

from ..exceptions import AuthenticationError
from ..services import get_token_service
from .schemas import SessionClaims

logger = logging.getLogger(__name__)


def _authenticate_request() -> SessionClaims:
    """
    Validate the bearer token of the current request.

    Stores the verified claims in flask.g:
    - g.claims: SessionClaims
    - g.account_id: account identifier

    Raises:
        AuthenticationError: If the header is missing or malformed, or the
            token is invalid or expired
    """
    auth_header = request.headers.get("Authorization")
    if auth_header is None:
        logger.warning("Unauthenticated request to protected endpoint")
        raise AuthenticationError(
            "Missing authorization header",
            {"code": "missing_auth", "expected": "Authorization: Bearer <token>"}
        )

    parts = auth_header.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError(
            "Invalid authorization header format",
            {"code": "invalid_header", "expected": "Authorization: Bearer <token>"}
        )

    claims = get_token_service().verify(parts[1])

    g.claims = claims
    g.account_id = claims.id
    logger.debug(f"Token authentication successful for account {claims.id}")
    return claims


def auth_required(f):
    """
    Decorator to require a session token for endpoint access.

    Example:
    ```python
    @auth_required
    def protected_endpoint():
        account_id = g.account_id
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        _authenticate_request()
        return f(*args, **kwargs)

    return wrapper
