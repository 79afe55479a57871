# app/core/deps.py
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import SessionAuthGate
from app.core.errors import Unauthenticated
from app.database import get_db
from app.models.user import User

LOGIN_URL = "/auth/google"


def get_auth_gate(request: Request) -> SessionAuthGate:
    return request.app.state.auth_gate


async def get_optional_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
    gate: SessionAuthGate = Depends(get_auth_gate),
) -> Optional[User]:
    if not gate.is_authenticated(request):
        return None
    return await gate.current_user(request, db)


async def get_current_user(current_user: Optional[User] = Depends(get_optional_user)) -> User:
    if current_user is None:
        raise Unauthenticated(
            "Authentication required. Please login first.", loginUrl=LOGIN_URL
        )
    return current_user
