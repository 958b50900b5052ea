"""
Pydantic schemas for request payloads, responses and token claims.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


# ═══════════════════════════════════════════════════════════════════════════════
# Inbound payloads
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterData(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginData(BaseModel):
    name: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


# ═══════════════════════════════════════════════════════════════════════════════
# Outbound bodies
# ═══════════════════════════════════════════════════════════════════════════════


class UserRead(BaseModel):
    """A persisted user as sent to clients.  ``password`` is the bcrypt hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    password: str
    contacts: List[str] = Field(default_factory=list)


class SignUpResponse(BaseModel):
    newUser: UserRead


class UserResponse(BaseModel):
    user: UserRead


class TokenResponse(BaseModel):
    token: str


# ═══════════════════════════════════════════════════════════════════════════════
# Token claims
# ═══════════════════════════════════════════════════════════════════════════════


class TokenPayload(BaseModel):
    """Decoded identity attached to authenticated requests."""

    id: str
    name: str
    iat: int = 0
    exp: int
