# app/core/auth.py
"""
Session-backed authentication gate.

One ``SessionAuthGate`` is built by the application factory and kept on
``app.state``; handlers reach it through ``app.core.deps.get_auth_gate``.
The gate only reads and writes the signed session cookie managed by
Starlette's ``SessionMiddleware``. The OAuth handshake lives in the auth routes.
"""
import logging
from typing import Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.user import user as user_crud
from app.models.user import User
from app.schemas.user import GoogleProfile

logger = logging.getLogger(__name__)


class SessionAuthGate:
    session_key = "user_id"

    def is_authenticated(self, request: Request) -> bool:
        return request.session.get(self.session_key) is not None

    async def current_user(self, request: Request, db: AsyncSession) -> Optional[User]:
        user_id = request.session.get(self.session_key)
        if user_id is None:
            return None
        current = await user_crud.get_by_id(db, int(user_id))
        if current is None:
            # the account behind a still-valid cookie is gone
            request.session.pop(self.session_key, None)
        return current

    async def login(self, request: Request, db: AsyncSession, profile: GoogleProfile) -> User:
        logged_in = await user_crud.upsert_google_user(db, profile)
        request.session.clear()
        request.session[self.session_key] = logged_in.id
        logger.info("User %s logged in", logged_in.id)
        return logged_in

    def logout(self, request: Request) -> None:
        user_id = request.session.get(self.session_key)
        request.session.clear()
        if user_id is not None:
            logger.info("User %s logged out", user_id)
