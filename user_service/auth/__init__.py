"""Authentication module for the user service.

This module provides credential and session functionality:
- Password strength and phone prefix validation
- Salted scrypt password hashing and verification
- JWT session token issuance and validation
- Account workflows (register, login, profile, profile update)
- Authentication decorator for protected endpoints
"""

from . import passwords, schemas, token, validators

__all__ = ["passwords", "schemas", "token", "validators"]
