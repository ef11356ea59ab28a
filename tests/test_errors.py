"""Tests for error handling and custom exceptions."""

import pytest
from flask import Flask
from user_service.exceptions import (
    AuthenticationError,
    ConflictError,
    InternalError,
    ResourceNotFound,
    UserServiceError,
    ValidationError,
)


@pytest.fixture
def error_app():
    """Create a test app with error testing routes."""
    test_app = Flask(__name__)
    test_app.config['TESTING'] = True

    # Copy error handlers from main app
    from user_service.main import (
        handle_authentication_error,
        handle_conflict,
        handle_internal_error,
        handle_user_service_error,
        handle_validation_error,
    )

    test_app.errorhandler(ValidationError)(handle_validation_error)
    test_app.errorhandler(AuthenticationError)(handle_authentication_error)
    test_app.errorhandler(ConflictError)(handle_conflict)
    test_app.errorhandler(UserServiceError)(handle_user_service_error)
    test_app.errorhandler(Exception)(handle_internal_error)

    @test_app.route('/test/validation')
    def test_validation():
        raise ValidationError("phone number must start with +62", details={"field": "phone"})

    @test_app.route('/test/auth')
    def test_auth():
        raise AuthenticationError("invalid phone or password")

    @test_app.route('/test/not-found')
    def test_not_found():
        raise ResourceNotFound("Account not found")

    @test_app.route('/test/conflict')
    def test_conflict():
        raise ConflictError("phone number already registered")

    @test_app.route('/test/storage')
    def test_storage():
        raise InternalError("disk I/O error")

    @test_app.route('/test/internal')
    def test_internal():
        raise RuntimeError("Something went wrong")

    return test_app


@pytest.fixture
def error_client(error_app):
    """Create test client for error testing."""
    return error_app.test_client()


class TestExceptionClasses:
    """Test custom exception classes."""

    def test_base_error_with_message(self):
        error = UserServiceError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"

    def test_base_error_without_details(self):
        assert UserServiceError("Test").details == {}

    def test_base_error_with_details(self):
        details = {"phone": "+62812345678912"}
        assert UserServiceError("Conflict", details=details).details == details

    @pytest.mark.parametrize("cls", [
        ValidationError, AuthenticationError, ResourceNotFound, ConflictError, InternalError,
    ])
    def test_inherits_base(self, cls):
        assert issubclass(cls, UserServiceError)


class TestErrorHandlers:
    """Test Flask error handlers."""

    @pytest.mark.parametrize("path,status,error_type", [
        ("/test/validation", 400, "ValidationError"),
        ("/test/auth", 401, "AuthenticationError"),
        ("/test/not-found", 500, "ResourceNotFound"),
        ("/test/conflict", 409, "ConflictError"),
        ("/test/storage", 500, "InternalError"),
    ])
    def test_status_and_type(self, error_client, path, status, error_type):
        response = error_client.get(path)
        assert response.status_code == status
        assert response.get_json()["error"]["type"] == error_type

    def test_details_included(self, error_client):
        data = error_client.get('/test/validation').get_json()
        assert data["error"]["message"] == "phone number must start with +62"
        assert data["error"]["details"] == {"field": "phone"}

    def test_error_without_details(self, error_client):
        data = error_client.get('/test/conflict').get_json()
        assert "details" not in data["error"]

    def test_internal_error_message_surfaced(self, error_client):
        data = error_client.get('/test/storage').get_json()
        assert data["error"]["message"] == "disk I/O error"

    def test_unexpected_exception_hidden(self, error_client):
        response = error_client.get('/test/internal')
        data = response.get_json()

        assert response.status_code == 500
        assert data["error"]["type"] == "InternalServerError"
        assert data["error"]["message"] == "An internal error occurred"
