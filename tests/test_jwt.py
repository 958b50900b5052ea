"""
Tests for token issuance and verification.
"""

import hashlib
import hmac
import json
from base64 import urlsafe_b64encode

import pytest

from auth.jwt import TokenError, TokenService

TEST_SECRET = "test-jwt-secret-for-testing-only"

USER = {"id": "userId", "name": "longusername", "email": "user@email.com"}


def _signed(raw: bytes, secret: str = TEST_SECRET) -> str:
    sig = hmac.new(secret.encode(), raw, hashlib.sha256).hexdigest()
    return urlsafe_b64encode(raw).decode() + "." + sig


class TestIssueAndVerify:
    def test_round_trip_keeps_identity(self, token_service):
        payload = token_service.verify(token_service.issue(USER))
        assert payload.id == "userId"
        assert payload.name == "longusername"
        assert payload.exp - payload.iat == 3600

    def test_only_identity_claims_are_encoded(self, token_service):
        token = token_service.issue(USER)
        assert "user@email.com" not in json.dumps(token_service.verify(token).model_dump())

    def test_ids_are_stringified(self, token_service):
        payload = token_service.verify(token_service.issue({"id": 42, "name": "n"}))
        assert payload.id == "42"

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            TokenService("", 60)


class TestVerifyFailures:
    def test_tampered_signature(self, token_service):
        token = token_service.issue(USER)
        body, sig = token.split(".")
        forged = body + "." + ("0" if sig[0] != "0" else "1") + sig[1:]
        with pytest.raises(TokenError):
            token_service.verify(forged)

    def test_other_secret(self, token_service):
        token = TokenService("another-secret", 3600).issue(USER)
        with pytest.raises(TokenError, match="signature"):
            token_service.verify(token)

    def test_expired(self, token_service):
        token = TokenService(TEST_SECRET, -10).issue(USER)
        with pytest.raises(TokenError, match="expired"):
            token_service.verify(token)

    @pytest.mark.parametrize("token", ["", "#", "a.b.c", ".", "abc.", "!!!.deadbeef"])
    def test_malformed(self, token_service, token):
        with pytest.raises(TokenError):
            token_service.verify(token)

    def test_non_ascii_signature(self, token_service):
        body = token_service.issue(USER).split(".")[0]
        with pytest.raises(TokenError):
            token_service.verify(body + ".é")

    def test_string_payload_is_invalid(self, token_service):
        token = _signed(json.dumps("Error").encode())
        with pytest.raises(TokenError, match="not an object"):
            token_service.verify(token)

    def test_missing_claims(self, token_service):
        token = _signed(json.dumps({"id": "userId", "exp": 9999999999}).encode())
        with pytest.raises(TokenError, match="identity"):
            token_service.verify(token)
