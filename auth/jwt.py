"""
JWT-style token creation and verification.

Tokens are base64url-encoded JSON payloads signed with HMAC-SHA256:
``<payload>.<hex signature>``.  The payload carries the subject's ``id``
and ``name`` plus ``iat`` / ``exp`` timestamps.

The secret is handed to ``TokenService`` once at startup (see
``config.jwt_secret``, env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import json
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Any, Mapping

from pydantic import ValidationError

from utils.schemas import TokenPayload


class TokenError(Exception):
    """Raised for malformed, forged, expired or non-object tokens."""


class TokenService:
    def __init__(self, secret: str, expiry_seconds: int) -> None:
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret.encode()
        self._expiry_seconds = expiry_seconds

    def _sign(self, raw: bytes) -> str:
        return hmac.new(self._secret, raw, hashlib.sha256).hexdigest()

    def issue(self, identity: Mapping[str, Any]) -> str:
        """Create a signed token for the ``id`` / ``name`` of ``identity``."""
        now = int(time.time())
        payload = {
            "id": str(identity["id"]),
            "name": identity["name"],
            "iat": now,
            "exp": now + self._expiry_seconds,
        }
        raw = json.dumps(payload, separators=(",", ":")).encode()
        return urlsafe_b64encode(raw).decode() + "." + self._sign(raw)

    def verify(self, token: str) -> TokenPayload:
        """
        Verify ``token`` and return its decoded payload.

        Raises ``TokenError`` on a bad structure or signature, an expired
        token, or a payload that does not decode to a JSON object.
        """
        parts = token.split(".") if isinstance(token, str) else []
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise TokenError("bad format")
        try:
            raw = urlsafe_b64decode(parts[0].encode())
        except (binascii.Error, ValueError) as exc:
            raise TokenError("bad encoding") from exc
        if not hmac.compare_digest(parts[1].encode(), self._sign(raw).encode()):
            raise TokenError("bad signature")
        try:
            decoded = json.loads(raw)
        except ValueError as exc:
            raise TokenError("bad payload") from exc
        if not isinstance(decoded, dict):
            raise TokenError("payload is not an object")
        try:
            payload = TokenPayload.model_validate(decoded)
        except ValidationError as exc:
            raise TokenError("payload is missing identity claims") from exc
        if payload.exp < time.time():
            raise TokenError("token expired")
        return payload
