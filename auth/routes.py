"""
Account API routes — sign-up, log-in, user lookup.

Each step converts its own failures into a classified error on the spot;
the application-wide handler in ``api.errors`` renders them.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from starlette.concurrency import run_in_threadpool

from api.dependencies import get_settings, get_token_service, get_user_store
from api.errors import CredentialError, NotFoundError, PersistenceError, ValidationError
from auth.dependencies import authentication
from auth.jwt import TokenService
from auth.password import HashingError, hash_password, verify_password
from config.settings import Settings
from database.users import StoreError, UserStore
from utils.schemas import SignUpResponse, TokenResponse, UserRead, UserResponse
from utils.validators import validate_login, validate_registration

logger = logging.getLogger(__name__)

router = APIRouter(tags=["accounts"])

SIGN_UP_REJECTED = "User did not provide email, name or password"
LOG_IN_REJECTED = "Invalid username or password"


@router.post("/sign-up", response_model=SignUpResponse)
async def sign_up(
    body: Optional[Dict[str, Any]] = Body(None),
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Register a new user."""
    result = validate_registration(body or {})
    if result.error is not None:
        raise ValidationError(404, SIGN_UP_REJECTED, result.message)

    data = result.value
    try:
        password_hash = await run_in_threadpool(
            hash_password, data.password, settings.bcrypt_rounds
        )
        user = await store.create(
            name=data.name,
            email=data.email,
            password=password_hash,
        )
    except (HashingError, StoreError) as exc:
        raise PersistenceError(404, SIGN_UP_REJECTED, str(exc)) from exc

    logger.info("Registered user %s (%s)", user.name, user.id)
    return {"newUser": UserRead.model_validate(user)}


@router.post("/log-in", response_model=TokenResponse)
async def log_in(
    body: Optional[Dict[str, Any]] = Body(None),
    store: UserStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, Any]:
    """Login with name + password."""
    result = validate_login(body or {})
    if result.error is not None:
        raise ValidationError(400, LOG_IN_REJECTED, result.message)

    data = result.value
    try:
        users = await store.find(name=data.name)
    except StoreError as exc:
        raise NotFoundError(404, LOG_IN_REJECTED, "User not found") from exc
    if not users:
        raise NotFoundError(404, LOG_IN_REJECTED, "User not found")

    user = users[0]
    if not await run_in_threadpool(verify_password, data.password, user.password):
        raise CredentialError(400, LOG_IN_REJECTED, "Invalid password")

    logger.info("Login: %s (%s)", user.name, user.id)
    return {"token": tokens.issue({"id": user.id, "name": user.name})}


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    dependencies=[Depends(authentication)],
)
async def get_user_data(
    user_id: str,
    store: UserStore = Depends(get_user_store),
) -> Dict[str, Any]:
    try:
        user = await store.find_by_id(user_id)
    except StoreError as exc:
        raise NotFoundError(
            404, "Bad request", f"Requested user does not exist: {exc}"
        ) from exc
    return {"user": UserRead.model_validate(user)}
