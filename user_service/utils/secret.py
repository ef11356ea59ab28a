"""Cryptographically secure random value generation.

This is the ONLY module that should import secrets. All other code should
use secret.generate_salt().
"""

import base64
import secrets

SALT_BYTES = 32


def generate_salt() -> str:
    """Generate a random per-account salt as a base64 string.

    Reads SALT_BYTES from the operating system's secure random source. If
    the source is unavailable the error propagates; there is no fallback.
    """
    return base64.b64encode(secrets.token_bytes(SALT_BYTES)).decode("ascii")
