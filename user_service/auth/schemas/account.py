"""Pydantic schemas for accounts, request bodies and session claims."""

from datetime import datetime

from pydantic import BaseModel, Field

from ...utils import isodatetime


# ============================================================================
# Account Record
# ============================================================================


class Account(BaseModel):
    """Account as stored in the directory.

    password_hash and salt never leave the service; responses are built from
    ProfileResponse instead.
    """

    id: int | None = None
    phone_number: str
    full_name: str
    password_hash: str
    salt: str
    created_at: str | None = None
    updated_at: str | None = None

    def to_profile(self) -> "ProfileResponse":
        """Public fields of the account."""
        return ProfileResponse(fullname=self.full_name, phone=self.phone_number)


# ============================================================================
# Request Bodies
# ============================================================================


class RegisterRequest(BaseModel):
    """Body of POST /register."""

    phone: str = Field(..., min_length=1, description="Phone number including country prefix")
    password: str = Field(..., min_length=1)
    fullname: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    """Body of POST /login."""

    phone: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UpdateProfileRequest(BaseModel):
    """Body of PATCH /profile. An empty fullname leaves the name unchanged."""

    phone: str = Field(..., min_length=1)
    fullname: str = ""


# ============================================================================
# Responses
# ============================================================================


class RegisterResponse(BaseModel):
    id: int


class LoginResponse(BaseModel):
    id: int
    token: str


class ProfileResponse(BaseModel):
    fullname: str
    phone: str


# ============================================================================
# Session Claims
# ============================================================================


class SessionClaims(BaseModel):
    """Decoded claims of a session token.

    id is the account identifier; exp and iat are Unix seconds.
    """

    id: int
    exp: int
    iat: int

    @property
    def expires_at(self) -> datetime:
        return isodatetime.from_unix(self.exp)

    @property
    def issued_at(self) -> datetime:
        return isodatetime.from_unix(self.iat)
