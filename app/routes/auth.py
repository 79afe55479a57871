# app/routes/auth.py
import logging

from authlib.integrations.starlette_client import OAuthError
from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import SessionAuthGate
from app.core.deps import get_auth_gate, get_current_user, get_optional_user
from app.database import get_db
from app.models.user import User
from app.schemas.user import GoogleProfile, UserRead, UserSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get("/google")
async def google_login(request: Request):
    settings = request.app.state.settings
    redirect_uri = settings.GOOGLE_CALLBACK_URL or str(request.url_for("auth_callback"))
    return await request.app.state.oauth.google.authorize_redirect(request, redirect_uri)


@router.get("/google/callback", name="auth_callback")
async def google_callback(
    request: Request,
    db: AsyncSession = Depends(get_db),
    gate: SessionAuthGate = Depends(get_auth_gate),
):
    try:
        token = await request.app.state.oauth.google.authorize_access_token(request)
        profile = GoogleProfile.from_userinfo(token["userinfo"])
    except (OAuthError, KeyError) as exc:
        logger.warning("Google callback failed: %r", exc)
        return RedirectResponse(url="/login-failed", status_code=302)

    await gate.login(request, db, profile)
    return RedirectResponse(url="/dashboard", status_code=302)


@router.get("/logout")
async def logout(request: Request, gate: SessionAuthGate = Depends(get_auth_gate)):
    gate.logout(request)
    return {"success": True, "message": "Logged out successfully"}


@router.get("/status")
async def auth_status(current_user: User | None = Depends(get_optional_user)):
    if current_user is None:
        return {"success": True, "authenticated": False, "message": "Not authenticated"}
    return {
        "success": True,
        "authenticated": True,
        "user": UserSummary.model_validate(current_user).model_dump(by_alias=True),
    }


@router.get("/profile")
async def profile(current_user: User = Depends(get_current_user)):
    return {"success": True, "user": UserRead.model_validate(current_user).model_dump(mode="json", by_alias=True)}
