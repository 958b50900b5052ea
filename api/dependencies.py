"""
FastAPI dependencies (shared across routes).

Collaborators are built once in ``create_app`` and kept on ``app.state``;
these functions hand them to request handlers.
"""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import TokenService
from config.settings import Settings
from database.session import get_db_session
from database.users import UserStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


async def get_user_store(session: AsyncSession = Depends(get_db_session)) -> UserStore:
    """A ``UserStore`` bound to the request's DB session."""
    return UserStore(session)
