"""Shared test fixtures for user-service."""

import os
import sqlite3
import tempfile
from datetime import datetime, timedelta, UTC

# Settings are read when user_service.main is imported, so the cheap scrypt
# work factor and test database must be in the environment first
os.environ.setdefault("SCRYPT_N", "1024")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-0123456789abcdefghijkl")
os.environ.setdefault(
    "DATABASE_PATH", os.path.join(tempfile.gettempdir(), "user_service_test.db")
)

import pytest

from user_service.main import app
from user_service.config import settings
from user_service.auth.passwords import PasswordHasher
from user_service.auth.service import AccountService
from user_service.auth.token import TokenService
from user_service.db import apply_schema
from user_service.db.account import AccountOperations

TEST_SECRET = "test-secret-key-0123456789abcdefghijkl"
PHONE = "+62812345678912"
PASSWORD = "A1234*"
FULLNAME = "mr smith"


class FrozenClock:
    """Clock callable for TokenService that only moves when told to."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def test_db():
    """Create in-memory test database with schema."""
    db = sqlite3.connect(":memory:")
    db.row_factory = sqlite3.Row
    apply_schema(db)

    yield db

    db.close()


@pytest.fixture
def clock():
    return FrozenClock(datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC))


@pytest.fixture
def hasher():
    """Scrypt hasher with a low work factor for fast tests."""
    return PasswordHasher(n=1024, r=8, p=1, dklen=32)


@pytest.fixture
def tokens(clock):
    return TokenService(TEST_SECRET, expiry=timedelta(hours=72), clock=clock)


@pytest.fixture
def directory(test_db):
    return AccountOperations(test_db)


@pytest.fixture
def account_service(directory, hasher, tokens):
    return AccountService(directory, hasher=hasher, tokens=tokens, phone_prefix="+62")


@pytest.fixture
def registered(account_service):
    """Register the default account and return its id."""
    return account_service.register(PHONE, PASSWORD, FULLNAME)


@pytest.fixture
def client():
    """Create test client for API testing.

    Each test gets a fresh temp file database.
    """
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    original_db_path = settings.database_path
    try:
        settings.database_path = db_path

        from user_service.db import init_db
        init_db()

        app.config['TESTING'] = True
        with app.test_client() as client:
            yield client

    finally:
        settings.database_path = original_db_path
        try:
            os.unlink(db_path)
        except OSError:
            pass


@pytest.fixture
def auth_headers(client):
    """Register and log in the default account through the API.

    Returns a dict with the Authorization header set.
    """
    client.post("/register", json={"phone": PHONE, "password": PASSWORD, "fullname": FULLNAME})
    response = client.post("/login", json={"phone": PHONE, "password": PASSWORD})
    token = response.get_json()["token"]
    return {"Authorization": f"Bearer {token}"}
