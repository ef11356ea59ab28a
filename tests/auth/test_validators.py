"""Tests for password policy and phone prefix checks."""

import pytest
from user_service.auth import validators
from user_service.exceptions import ValidationError


class TestValidatePassword:
    """Tests for validate_password."""

    @pytest.mark.parametrize("password", [
        "Password1!",
        "A1234*",
        "Zz9@zz",
        "A1$" + "a" * 61,
        "?Q1aaa",
    ])
    def test_valid(self, password):
        assert validators.validate_password(password) is True

    @pytest.mark.parametrize("password,reason", [
        ("password", "no uppercase, digit or special"),
        ("Password", "no digit or special"),
        ("Password1", "no special"),
        ("password1!", "no uppercase"),
        ("Password!", "no digit"),
        ("Pa1!", "too short"),
        ("Pas1!", "five characters"),
        ("A1$" + "a" * 62, "65 characters"),
        ("1234567890" * 7, "too long"),
        ("Äbc123!", "non-ASCII uppercase only"),
        ("Password1#", "special character outside the set"),
        ("", "empty"),
    ])
    def test_invalid(self, password, reason):
        assert validators.validate_password(password) is False, reason

    def test_length_boundaries(self):
        assert validators.validate_password("A1*" + "a" * 3) is True
        assert validators.validate_password("A1*" + "a" * 61) is True
        assert validators.validate_password("A1*" + "a" * 2) is False
        assert validators.validate_password("A1*" + "a" * 62) is False

    def test_length_counts_utf8_bytes(self):
        """Multibyte characters count once per encoded byte."""
        assert len("A1*" + "é" * 61) == 64
        assert validators.validate_password("A1*" + "é" * 61) is False
        assert validators.validate_password("A1*" + "é" * 30 + "a") is True
        assert validators.validate_password("A1*éa") is True
        assert validators.validate_password("A1*é") is False

    @pytest.mark.parametrize("special", list("@$!%*?&"))
    def test_each_special_character_accepted(self, special):
        assert validators.validate_password(f"Abc12{special}") is True


class TestPasswordViolations:
    """Tests for password_violations."""

    def test_no_violations(self):
        assert validators.password_violations("A1234*") == []

    def test_reports_every_failing_rule(self):
        violations = validators.password_violations("abc")
        assert len(violations) == 4

    def test_reports_only_missing_special(self):
        violations = validators.password_violations("Password1")
        assert violations == ["must contain one of @$!%*?&"]


class TestPhonePrefix:
    """Tests for phone prefix checks."""

    def test_has_prefix(self):
        assert validators.has_phone_prefix("+62812345678912") is True

    @pytest.mark.parametrize("phone", ["0812345678912", "+63812345678912", "62812", "+6", ""])
    def test_missing_prefix(self, phone):
        assert validators.has_phone_prefix(phone) is False

    def test_custom_prefix(self):
        assert validators.has_phone_prefix("+6512345678", prefix="+65") is True

    def test_require_prefix_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            validators.require_phone_prefix("0812345678912")
        assert exc_info.value.message == "phone number must start with +62"
        assert exc_info.value.details == {"field": "phone"}

    def test_require_prefix_passes(self):
        validators.require_phone_prefix("+62812345678912")
