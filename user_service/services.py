"""Process-wide service wiring.

The password hasher and token service are built once from settings when the
app starts and stored on app.extensions. Request handlers combine them with a
per-request database Core to get an AccountService.
"""

import logging

from flask import Flask, current_app

from .auth.passwords import PasswordHasher
from .auth.service import AccountService
from .auth.token import TokenService
from .db import Core

logger = logging.getLogger(__name__)

EXTENSION_KEY = "user_service"


class ServiceRegistry:
    """Long-lived, read-only collaborators shared by all requests."""

    def __init__(self, hasher: PasswordHasher, tokens: TokenService, phone_prefix: str):
        self.hasher = hasher
        self.tokens = tokens
        self.phone_prefix = phone_prefix


def init_app(app: Flask, settings) -> ServiceRegistry:
    """Build the shared services from settings and attach them to app."""
    registry = ServiceRegistry(
        hasher=PasswordHasher.from_settings(settings),
        tokens=TokenService.from_settings(settings),
        phone_prefix=settings.phone_prefix,
    )
    app.extensions[EXTENSION_KEY] = registry
    logger.info(
        f"Services initialized (scrypt n={registry.hasher.n}, "
        f"token expiry={registry.tokens.expiry})"
    )
    return registry


def get_registry() -> ServiceRegistry:
    return current_app.extensions[EXTENSION_KEY]


def get_token_service() -> TokenService:
    return get_registry().tokens


def account_service(core: Core) -> AccountService:
    """AccountService bound to the account directory of core."""
    registry = get_registry()
    return AccountService(
        core.account,
        hasher=registry.hasher,
        tokens=registry.tokens,
        phone_prefix=registry.phone_prefix,
    )
