"""HTTP API for the user service."""

from .accounts import accounts_bp

__all__ = ["accounts_bp"]
