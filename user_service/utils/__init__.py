"""Utility functions for the user service.

Import convention: use module-level imports for clarity.

    from utils import isodatetime, secret
    timestamp = isodatetime.now()
    salt = secret.generate_salt()
"""

from . import isodatetime, secret

__all__ = ["isodatetime", "secret"]
