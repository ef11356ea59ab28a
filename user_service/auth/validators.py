"""Credential and phone number policy checks."""

import re

from ..exceptions import ValidationError

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 64
SPECIAL_CHARACTERS = "@$!%*?&"

_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(r"[@$!%*?&]")

_RULES = (
    (
        "length",
        lambda p: PASSWORD_MIN_LENGTH <= len(p.encode("utf-8")) <= PASSWORD_MAX_LENGTH,
        f"must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} bytes long",
    ),
    ("uppercase", lambda p: _UPPERCASE.search(p) is not None, "must contain an uppercase letter"),
    ("digit", lambda p: _DIGIT.search(p) is not None, "must contain a digit"),
    (
        "special",
        lambda p: _SPECIAL.search(p) is not None,
        f"must contain one of {SPECIAL_CHARACTERS}",
    ),
)


def password_violations(password: str) -> list[str]:
    """Return the description of every password rule that fails."""
    return [message for _name, check, message in _RULES if not check(password)]


def validate_password(password: str) -> bool:
    """
    Check a password against the strength policy.

    All rules must hold: UTF-8 length in [6, 64] bytes, at least one ASCII uppercase
    letter, one digit and one character from @$!%*?&.
    """
    return not password_violations(password)


def has_phone_prefix(phone: str, prefix: str = "+62") -> bool:
    """Return True when the phone number starts with the required prefix."""
    return phone.startswith(prefix)


def require_phone_prefix(phone: str, prefix: str = "+62") -> None:
    """Raise ValidationError unless the phone number starts with prefix."""
    if not has_phone_prefix(phone, prefix):
        raise ValidationError(
            f"phone number must start with {prefix}",
            {"field": "phone"}
        )
