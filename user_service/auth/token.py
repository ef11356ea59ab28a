"""
JWT session token service.

Tokens are HS256-signed JWTs carrying the account id plus issued-at and
expiry timestamps:

    {"id": 42, "iat": 1767225600, "exp": 1767484800}

Tokens are self-contained. There is no server-side session store and no
revocation list, so a validly signed, unexpired token is always accepted.
Rotating the signing key invalidates every outstanding token.

Expiry is checked against an injectable clock instead of PyJWT's own call to
the system time, which lets tests control expiry deterministically.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable

import jwt
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import AuthenticationError
from ..utils import isodatetime
from .schemas import SessionClaims

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["id", "exp", "iat"]


class TokenService:
    """Issues and verifies session tokens with a shared symmetric key."""

    def __init__(
        self,
        secret_key: str,
        expiry: timedelta = timedelta(hours=72),
        clock: Callable[[], datetime] | None = None,
        algorithm: str = ALGORITHM,
    ):
        if not secret_key:
            raise ValueError("Token signing key must not be empty")
        self._secret_key = secret_key
        self.expiry = expiry
        self.algorithm = algorithm
        self._clock = clock or isodatetime.utcnow

    @classmethod
    def from_settings(cls, settings, clock: Callable[[], datetime] | None = None) -> "TokenService":
        """Build a token service from the jwt_* configuration values."""
        return cls(
            secret_key=settings.jwt_secret_key,
            expiry=timedelta(hours=settings.jwt_expiry_hours),
            clock=clock,
        )

    def now(self) -> int:
        """Current time from the configured clock, in Unix seconds."""
        return isodatetime.to_unix(self._clock())

    def issue(self, account_id: int) -> str:
        """
        Mint a session token for an account.

        Args:
            account_id: Identifier of the authenticated account

        Returns:
            URL-safe signed JWT string
        """
        issued_at = self.now()
        payload = {
            "id": account_id,
            "iat": issued_at,
            "exp": issued_at + int(self.expiry.total_seconds()),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> SessionClaims:
        """
        Validate a session token and return its claims.

        The signature is checked first; a token whose signature does not match
        is invalid whatever its claims say. A correctly signed token is then
        rejected once the clock reaches its exp claim.

        Raises:
            AuthenticationError: code "invalid_token" for bad signature,
                malformed token or missing claims; code "token_expired" when
                now >= exp
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={
                    "require": REQUIRED_CLAIMS,
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
            claims = SessionClaims(**payload)
        except (jwt.InvalidTokenError, PydanticValidationError) as e:
            logger.warning(f"Invalid session token: {e}")
            raise AuthenticationError("Invalid token", {"code": "invalid_token"})

        if self.now() >= claims.exp:
            logger.warning(f"Expired session token for account {claims.id}")
            raise AuthenticationError("Token has expired", {"code": "token_expired"})

        return claims

    def get_token_expiry_remaining(self, claims: SessionClaims) -> int:
        """Seconds left before the claims expire (negative once expired)."""
        return claims.exp - self.now()


def decode_token_no_validation(token: str) -> dict:
    """
    Decode a token without checking signature or expiry.

    For inspection and debugging only; never use the result to authorize.
    """
    return jwt.decode(token, options={"verify_signature": False})
