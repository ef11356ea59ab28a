"""Authentication Pydantic schemas for API validation."""

from .account import (
    Account,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    RegisterRequest,
    RegisterResponse,
    SessionClaims,
    UpdateProfileRequest,
)

__all__ = [
    "Account",
    "LoginRequest",
    "LoginResponse",
    "ProfileResponse",
    "RegisterRequest",
    "RegisterResponse",
    "SessionClaims",
    "UpdateProfileRequest",
]
