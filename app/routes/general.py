# app/routes/general.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.deps import LOGIN_URL, get_optional_user
from app.models.user import User

router = APIRouter(tags=["general"])

GRAPHQL_PATH = "/api/graphql"
TASKS_PATH = "/api/tasks"


@router.get("/")
async def root():
    return {
        "message": "Task Manager API with OAuth, GraphQL and REST",
        "endpoints": {
            "graphql": GRAPHQL_PATH,
            "rest": {"auth": "/auth", "tasks": TASKS_PATH},
        },
        "authentication": {
            "login": LOGIN_URL,
            "logout": "/auth/logout",
            "status": "/auth/status",
            "profile": "/auth/profile",
        },
    }


@router.get("/health")
async def health(request: Request):
    return {"status": "ok", "app": request.app.state.settings.APP_NAME}


@router.get("/dashboard")
async def dashboard(current_user: User | None = Depends(get_optional_user)):
    if current_user is None:
        return JSONResponse(
            status_code=401,
            content={"success": False, "message": "Please login", "loginUrl": LOGIN_URL},
        )
    return {
        "success": True,
        "message": f"Welcome {current_user.display_name}!",
        "user": {
            "email": current_user.email,
            "displayName": current_user.display_name,
            "picture": current_user.picture,
        },
        "endpoints": {
            "graphql": GRAPHQL_PATH,
            "tasks": TASKS_PATH,
            "profile": "/auth/profile",
            "logout": "/auth/logout",
        },
    }


@router.get("/login-failed")
async def login_failed():
    return JSONResponse(
        status_code=401,
        content={"success": False, "message": "Login failed", "loginUrl": LOGIN_URL},
    )
