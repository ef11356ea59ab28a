"""User service: phone-keyed accounts with salted scrypt passwords and JWT sessions."""

__version__ = "0.1.0"
