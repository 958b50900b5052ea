"""
Tests for the sign-up / log-in payload validators.
"""

import pytest

from utils.schemas import LoginData, RegisterData
from utils.validators import validate_login, validate_registration


class TestValidateRegistration:
    def test_valid_payload(self):
        result = validate_registration(
            {"name": "longusername", "email": "user@email.com", "password": "pw"}
        )
        assert result.error is None
        assert result.message == ""
        assert isinstance(result.value, RegisterData)
        assert result.value.name == "longusername"

    def test_empty_payload_reports_every_field(self):
        result = validate_registration({})
        assert result.error is not None
        assert result.message == (
            '"name" is required. "email" is required. "password" is required'
        )

    def test_invalid_payload_keeps_raw_value(self):
        raw = {"name": "longusername"}
        result = validate_registration(raw)
        assert result.value is raw
        assert result.message == '"email" is required. "password" is required'

    def test_empty_string_rejected(self):
        result = validate_registration(
            {"name": "", "email": "user@email.com", "password": "pw"}
        )
        assert result.message == '"name" is not allowed to be empty'

    def test_wrong_type_reported(self):
        result = validate_registration(
            {"name": 123, "email": "user@email.com", "password": "pw"}
        )
        assert result.message.startswith('"name" ')
        assert "string" in result.message

    def test_non_object_payload(self):
        result = validate_registration(None)
        assert result.error is not None
        assert result.message.startswith('"value" ')


class TestValidateLogin:
    def test_valid_payload(self):
        result = validate_login({"name": "longusername", "password": "pw"})
        assert result.error is None
        assert isinstance(result.value, LoginData)

    @pytest.mark.parametrize(
        "payload, expected",
        [
            ({}, '"name" is required. "password" is required'),
            ({"name": "longusername"}, '"password" is required'),
            ({"password": "pw"}, '"name" is required'),
        ],
    )
    def test_missing_fields(self, payload, expected):
        assert validate_login(payload).message == expected

    def test_extra_fields_ignored(self):
        result = validate_login({"name": "n", "password": "p", "email": "e"})
        assert result.error is None
        assert not hasattr(result.value, "email")
