"""
FastAPI dependencies for authentication.

``authentication`` guards protected routes: it requires an
``Authorization: Bearer <token>`` header, verifies the token and attaches
the decoded payload to ``request.state.payload``.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Header, Request

from api.dependencies import get_token_service
from api.errors import AuthenticationError
from auth.jwt import TokenError, TokenService
from utils.schemas import TokenPayload

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


async def authentication(
    request: Request,
    authorization: Optional[str] = Header(None, alias="Authorization"),
    tokens: TokenService = Depends(get_token_service),
) -> TokenPayload:
    """
    Extract and verify the Bearer token, returning the decoded payload.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthenticationError(private_message="Bad request")

    token = authorization[len(BEARER_PREFIX):]
    try:
        payload = tokens.verify(token)
    except TokenError as exc:
        logger.debug("Rejected token on %s: %s", request.url.path, exc)
        raise AuthenticationError(private_message="Invalid token") from exc

    request.state.payload = payload
    return payload
