# app/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from app.core.auth import SessionAuthGate
from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.core.oauth import build_oauth
from app.database import build_engine, build_sessionmaker, create_tables
from app.graphql.schema import build_graphql_router
from app.routes import auth, general, tasks

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s, creating database tables", app.state.settings.APP_NAME)
    await create_tables(app.state.engine)
    yield
    await app.state.engine.dispose()
    logger.info("Shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. Run with ``uvicorn app.main:create_app --factory``."""
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, sql_echo=settings.DATABASE_ECHO)

    app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)

    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)
    app.state.oauth = build_oauth(settings)
    app.state.auth_gate = SessionAuthGate()

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET,
        max_age=settings.SESSION_MAX_AGE,
        https_only=settings.is_production,
        same_site="lax",
    )
    # outermost, so preflight requests never reach the session layer
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.CLIENT_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(general.router)
    app.include_router(auth.router)
    app.include_router(tasks.router)
    app.include_router(build_graphql_router(), prefix=general.GRAPHQL_PATH)

    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
