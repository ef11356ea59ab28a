"""Account endpoints.

- POST  /register - Create account, returns its id
- POST  /login    - Verify credentials, returns id and session token
- GET   /profile  - Profile of the token holder
- PATCH /profile  - Change phone number and optionally full name

Profile endpoints require Authorization: Bearer <token>.
"""

import logging

from flask import Blueprint, g, jsonify

from ..auth.decorators import auth_required
from ..auth.schemas import LoginRequest, RegisterRequest, RegisterResponse, UpdateProfileRequest
from ..db import get_core
from ..services import account_service
from .validation import validate_request

logger = logging.getLogger(__name__)

accounts_bp = Blueprint("accounts", __name__)


@accounts_bp.post("/register")
@validate_request
def register(data: RegisterRequest):
    """
    Register a new account.

    Returns:
        201: {"id": 1}
        400: Missing field, weak password or phone without +62 prefix
        409: Phone number already registered
    """
    with get_core(atomic=True) as core:
        account_id = account_service(core).register(data.phone, data.password, data.fullname)

    return jsonify(RegisterResponse(id=account_id).model_dump()), 201


@accounts_bp.post("/login")
@validate_request
def login(data: LoginRequest):
    """
    Authenticate with phone number and password.

    Returns:
        200: {"id": 1, "token": "eyJhbGciOiJIUzI1NiIs..."}
        400: Missing field or phone without +62 prefix
        401: Invalid phone or password
    """
    core = get_core()
    try:
        result = account_service(core).login(data.phone, data.password)
    finally:
        core.close()

    return jsonify(result.model_dump()), 200


@accounts_bp.get("/profile")
@auth_required
def get_profile():
    """
    Get the profile of the authenticated account.

    Returns:
        200: {"fullname": "mr smith", "phone": "+62812345678912"}
        401: Missing, invalid or expired token
    """
    core = get_core()
    try:
        profile = account_service(core).profile(g.claims)
    finally:
        core.close()

    return jsonify(profile.model_dump()), 200


@accounts_bp.patch("/profile")
@auth_required
@validate_request
def update_profile(data: UpdateProfileRequest):
    """
    Update phone number and, when non-empty, full name.

    Returns:
        200: Updated profile
        400: Missing phone or phone without +62 prefix
        401: Missing, invalid or expired token
        409: Phone number registered to another account
    """
    with get_core(atomic=True) as core:
        profile = account_service(core).update_profile(g.claims, data.phone, data.fullname)

    return jsonify(profile.model_dump()), 200
