"""Account operations.

IMPORT CONVENTION:
- Core accesses these through core.account property
- NO direct import needed when using Core API

Phone number uniqueness is enforced by the UNIQUE constraint on
accounts.phone_number. A violation surfaces as ConflictError no matter
whether the caller checked beforehand, so two concurrent registrations of the
same number cannot both succeed.
"""

import logging
import sqlite3

from ..auth.schemas import Account
from ..exceptions import ConflictError, InternalError, ResourceNotFound
from ..utils import isodatetime

logger = logging.getLogger(__name__)


def _row_to_account(row: sqlite3.Row) -> Account:
    return Account(
        id=row["id"],
        phone_number=row["phone_number"],
        full_name=row["full_name"],
        password_hash=row["password_hash"],
        salt=row["salt"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _translate_write_error(error: sqlite3.Error, phone: str) -> Exception:
    """Map a failed INSERT/UPDATE to the directory's error contract.

    The only constraint a well-formed Account can violate is the UNIQUE
    phone_number column.
    """
    if isinstance(error, sqlite3.IntegrityError):
        return ConflictError(
            "phone number already registered",
            {"phone": phone}
        )
    return InternalError(str(error))


class AccountOperations:
    """SQLite-backed account directory."""

    def __init__(self, conn: sqlite3.Connection):
        """Initialize account operations with a database connection.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = conn

    def _fetch_one(self, sql: str, params: tuple) -> sqlite3.Row | None:
        try:
            return self._conn.execute(sql, params).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Account lookup failed: {e}")
            raise InternalError(str(e)) from e

    def find_by_phone(self, phone: str) -> Account:
        """Get account by phone number.

        Raises:
            ResourceNotFound: If no account has this phone number
            InternalError: If the query fails
        """
        row = self._fetch_one(
            "SELECT * FROM accounts WHERE phone_number = ?",
            (phone,)
        )
        if not row:
            raise ResourceNotFound(
                "Account not found",
                {"phone": phone}
            )
        return _row_to_account(row)

    def find_by_id(self, account_id: int) -> Account:
        """Get account by ID.

        Raises:
            ResourceNotFound: If account_id doesn't exist
            InternalError: If the query fails
        """
        row = self._fetch_one(
            "SELECT * FROM accounts WHERE id = ?",
            (account_id,)
        )
        if not row:
            raise ResourceNotFound(
                f"Account '{account_id}' not found",
                {"account_id": account_id}
            )
        return _row_to_account(row)

    def create(self, account: Account) -> Account:
        """Insert a new account.

        The id is assigned by the database; the returned Account carries it.

        Raises:
            ConflictError: If the phone number is already registered
            InternalError: For any other storage failure
        """
        now = isodatetime.now()
        try:
            cursor = self._conn.execute(
                """INSERT INTO accounts
                   (phone_number, full_name, password_hash, salt, created_at, updated_at)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                (account.phone_number, account.full_name, account.password_hash,
                 account.salt, now, now)
            )
        except sqlite3.Error as e:
            raise _translate_write_error(e, account.phone_number) from e

        return account.model_copy(
            update={"id": cursor.lastrowid, "created_at": now, "updated_at": now}
        )

    def update(self, account: Account) -> Account:
        """Persist phone number and full name of an existing account.

        password_hash and salt are immutable after creation and never written.

        Raises:
            ResourceNotFound: If the account no longer exists
            ConflictError: If the new phone number belongs to another account
            InternalError: For any other storage failure
        """
        now = isodatetime.now()
        try:
            cursor = self._conn.execute(
                """UPDATE accounts
                   SET phone_number = ?, full_name = ?, updated_at = ?
                   WHERE id = ?""",
                (account.phone_number, account.full_name, now, account.id)
            )
        except sqlite3.Error as e:
            raise _translate_write_error(e, account.phone_number) from e

        if cursor.rowcount == 0:
            raise ResourceNotFound(
                f"Account '{account.id}' not found",
                {"account_id": account.id}
            )

        return account.model_copy(update={"updated_at": now})
