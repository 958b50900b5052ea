"""
User persistence — create, find and find-by-id on top of an AsyncSession.

Store failures surface as ``StoreError`` carrying an opaque message;
callers decide how to present them.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The underlying store rejected or failed an operation."""


class RecordNotFoundError(StoreError):
    pass


class UserStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, **fields: Any) -> User:
        """Insert a new user; a duplicate ``name`` raises ``StoreError``."""
        user = User(id=str(uuid.uuid4()), contacts=[], **fields)
        self._session.add(user)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            raise StoreError(f"User {fields.get('name')!r} already exists") from exc
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise StoreError(str(exc)) from exc
        logger.debug("Created user %s (%s)", user.name, user.id)
        return user

    async def find(self, **filters: Any) -> List[User]:
        try:
            stmt = select(User).filter_by(**filters)
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc
        return list(result.scalars().all())

    async def find_by_id(self, user_id: str) -> User:
        try:
            user = await self._session.get(User, user_id)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc
        if user is None:
            raise RecordNotFoundError(f"No user with id {user_id!r}")
        return user
