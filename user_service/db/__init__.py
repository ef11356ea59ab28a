"""Database module for the user service.

This module provides the Core API for database operations.
Core encapsulates connection management and provides access to account
operations.

ARCHITECTURE:
- Core owns its connection (no Flask g.db dependency)
- atomic=True: commit on clean context exit, rollback on exception
- atomic=False: read-only use; caller closes the connection

Password hashing happens before any write is issued, so no transaction is
open while the CPU-bound KDF runs.
"""

from pathlib import Path
from typing import TYPE_CHECKING
import sqlite3
from ..config import settings

if TYPE_CHECKING:
    from .account import AccountOperations

SCHEMA_PATH = Path(__file__).parent.parent / "schema" / "schema.sql"


class Core:
    """
    Database Core with account operations.

    Maintains its own connection and transaction state.
    """

    def __init__(self, connection: sqlite3.Connection, atomic: bool = False):
        """Initialize Core with a database connection.

        Args:
            connection: SQLite connection with row_factory set to sqlite3.Row
            atomic: If True, Core MUST be used as context manager.
        """
        self._conn = connection
        self._atomic = atomic
        self._account_ops = None

    @property
    def account(self) -> "AccountOperations":
        """Account directory operations.

        Lazy-loaded to avoid circular import issues.
        """
        if self._account_ops is None:
            from .account import AccountOperations
            self._account_ops = AccountOperations(self._conn)
        return self._account_ops

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "Core":
        """Enter context manager for atomic transaction.

        Raises:
            RuntimeError: If Core was not created with atomic=True
        """
        if not self._atomic:
            raise RuntimeError(
                "Core must be created with atomic=True for context manager use. "
                "Use: with db.get_core(atomic=True) as core:"
            )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager, committing or rolling back transaction."""
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            self._conn.close()


def _create_connection() -> sqlite3.Connection:
    """Create a fresh database connection.

    Returns:
        SQLite connection with row_factory set to sqlite3.Row
    """
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    return conn


def get_core(atomic: bool = False) -> Core:
    """
    Get a database Core instance.

    Args:
        atomic: If True, returns a Core that MUST be used as context manager.
                All writes commit together on exit.

    Examples:
        >>> with get_core(atomic=True) as core:
        ...     account = core.account.find_by_phone("+62812345678912")
    """
    conn = _create_connection()
    return Core(conn, atomic=atomic)


# ============================================================================
# DATABASE INITIALIZATION
# ============================================================================

def apply_schema(conn: sqlite3.Connection) -> None:
    """Run schema.sql against an open connection."""
    conn.executescript(SCHEMA_PATH.read_text())
    conn.commit()


def init_db():
    """Initialize database by running schema.sql if not already initialized."""
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    try:
        cursor = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
        )
        if cursor.fetchone():
            return
        apply_schema(conn)
    finally:
        conn.close()
