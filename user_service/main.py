"""Flask application entry point."""

import logging
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from . import services
from .config import settings
from .db import init_db
from .exceptions import (
    AuthenticationError,
    ConflictError,
    UserServiceError,
    ValidationError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Create Flask app
app = Flask(__name__)

# CORS configuration
CORS(app, origins=settings.cors_origins, supports_credentials=True)

# Signing key and scrypt work factor are read once here
services.init_app(app, settings)


def initialize_database():
    """Initialize database on app startup."""
    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise


with app.app_context():
    initialize_database()


# Error handlers
def _error_response(error: UserServiceError, status: int):
    response = {
        "error": {
            "type": error.__class__.__name__,
            "message": error.message
        }
    }
    if error.details:
        response["error"]["details"] = error.details
    return jsonify(response), status


@app.errorhandler(ValidationError)
def handle_validation_error(error):
    """Handle ValidationError exceptions."""
    return _error_response(error, 400)


@app.errorhandler(AuthenticationError)
def handle_authentication_error(error):
    """Handle AuthenticationError exceptions."""
    return _error_response(error, 401)


@app.errorhandler(ConflictError)
def handle_conflict(error):
    """Handle ConflictError exceptions."""
    return _error_response(error, 409)


@app.errorhandler(UserServiceError)
def handle_user_service_error(error):
    """Handle InternalError and any other UserServiceError."""
    logger.error(f"{error.__class__.__name__}: {error.message}")
    return _error_response(error, 500)


@app.errorhandler(Exception)
def handle_internal_error(error):
    """Handle HTTP errors raised by Flask and unexpected exceptions."""
    if isinstance(error, HTTPException):
        return jsonify({
            "error": {
                "type": error.name.replace(" ", ""),
                "message": error.description
            }
        }), error.code

    logger.exception(f"Internal error: {error}")
    return jsonify({
        "error": {
            "type": "InternalServerError",
            "message": "An internal error occurred"
        }
    }), 500


# Health check endpoint
@app.route("/health")
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})


# Register API blueprints
from .api import accounts_bp

app.register_blueprint(accounts_bp)


if __name__ == "__main__":
    app.run(debug=True)
