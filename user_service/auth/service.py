"""Account workflows: register, login, profile and profile update.

AccountService composes the credential policy, the password hasher, the
account directory and the token service. Each call is independent; the
service keeps no state between requests.

Phone number uniqueness is checked up front for a specific error message,
but the directory's unique constraint is what actually guarantees it. A
conflict reported by the directory on write is treated exactly like one
found by the pre-check.
"""

import logging
from typing import TYPE_CHECKING

from ..exceptions import AuthenticationError, ConflictError, InternalError, ResourceNotFound, ValidationError
from ..utils import secret
from . import validators
from .passwords import PasswordHasher
from .schemas import Account, LoginResponse, ProfileResponse, SessionClaims
from .token import TokenService

if TYPE_CHECKING:
    from ..db.directory import AccountDirectory

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "invalid phone or password"
ALREADY_REGISTERED = "phone number already registered"
WEAK_PASSWORD = (
    "password must be 6 to 64 characters and contain at least 1 uppercase letter, "
    "1 number, and 1 special character"
)

# Hashed when the phone number is unknown so that login takes the same time
# whether or not the account exists
_UNKNOWN_ACCOUNT_SALT = "unknown-account"


class AccountService:
    """Identity workflows over an account directory."""

    def __init__(
        self,
        directory: "AccountDirectory",
        hasher: PasswordHasher,
        tokens: TokenService,
        phone_prefix: str = "+62",
    ):
        self._directory = directory
        self._hasher = hasher
        self._tokens = tokens
        self.phone_prefix = phone_prefix

    # ========================================================================
    # Register
    # ========================================================================

    def register(self, phone: str, password: str, full_name: str) -> int:
        """
        Create an account and return its identifier.

        Raises:
            ValidationError: Phone prefix missing or password too weak.
                Raised before any directory call.
            ConflictError: Phone number already registered
            InternalError: Storage failure
        """
        validators.require_phone_prefix(phone, self.phone_prefix)

        violations = validators.password_violations(password)
        if violations:
            raise ValidationError(WEAK_PASSWORD, {"field": "password", "violations": violations})

        salt = secret.generate_salt()
        password_hash = self._hasher.hash(password, salt)

        try:
            self._directory.find_by_phone(phone)
        except ResourceNotFound:
            pass
        else:
            logger.warning("Registration rejected, phone number already registered")
            raise ConflictError(ALREADY_REGISTERED, {"phone": phone})

        account = self._directory.create(
            Account(
                phone_number=phone,
                full_name=full_name,
                password_hash=password_hash,
                salt=salt,
            )
        )

        logger.info(f"Account registered: {account.id}")
        return account.id

    # ========================================================================
    # Login
    # ========================================================================

    def login(self, phone: str, password: str) -> LoginResponse:
        """
        Verify credentials and issue a session token.

        An unknown phone number and a wrong password produce the same
        AuthenticationError so callers cannot tell which accounts exist.

        Raises:
            ValidationError: Phone prefix missing
            AuthenticationError: Unknown phone or wrong password
            InternalError: Storage failure
        """
        validators.require_phone_prefix(phone, self.phone_prefix)

        try:
            account = self._directory.find_by_phone(phone)
        except ResourceNotFound:
            self._hasher.hash(password, _UNKNOWN_ACCOUNT_SALT)
            logger.warning("Failed login attempt for unknown phone number")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not self._hasher.verify(password, account.salt, account.password_hash):
            logger.warning(f"Failed login attempt for account {account.id}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = self._tokens.issue(account.id)
        logger.info(f"Successful login: {account.id}")
        return LoginResponse(id=account.id, token=token)

    # ========================================================================
    # Profile
    # ========================================================================

    def _load_account(self, claims: SessionClaims) -> Account:
        # A validly signed token names an account that must exist
        try:
            return self._directory.find_by_id(claims.id)
        except ResourceNotFound as e:
            raise InternalError(e.message, e.details) from e

    def profile(self, claims: SessionClaims) -> ProfileResponse:
        """Return the public fields of the token holder's account."""
        return self._load_account(claims).to_profile()

    def update_profile(self, claims: SessionClaims, phone: str, full_name: str = "") -> ProfileResponse:
        """
        Change the phone number and optionally the full name.

        Moving to a phone number the account already owns is allowed. An
        empty full_name leaves the stored name unchanged.

        Raises:
            ValidationError: Phone prefix missing
            ConflictError: Phone number owned by another account
            InternalError: Storage failure
        """
        validators.require_phone_prefix(phone, self.phone_prefix)

        account = self._load_account(claims)

        try:
            owner = self._directory.find_by_phone(phone)
        except ResourceNotFound:
            pass
        else:
            if owner.id != account.id:
                logger.warning(f"Profile update rejected for account {account.id}, phone taken")
                raise ConflictError(ALREADY_REGISTERED, {"phone": phone})

        account.phone_number = phone
        if full_name:
            account.full_name = full_name

        try:
            account = self._directory.update(account)
        except ResourceNotFound as e:
            raise InternalError(e.message, e.details) from e

        logger.info(f"Profile updated: {account.id}")
        return account.to_profile()
