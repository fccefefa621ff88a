from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.config import Settings, get_settings
from app.database.session import build_sqlalchemy_database_url_from_settings, get_engine, get_local_session
from app.exceptions import InvalidTimestampError
from app.log import configure_logging, get_logger
from app.model import users, goals, milestones, progress_updates, motivational_content  # noqa: F401
from app.router import (
    auth_router,
    goals_router,
    progress_router,
    users_router,
    ai_router,
)

log = get_logger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidTimestampError)
    async def invalid_timestamp_handler(request: Request, exc: InvalidTimestampError):
        log.error("Streak calculation failed on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Could not calculate streak"},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        log.error("Database error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API around an explicit settings object.

    Parameters:
        settings (Settings, optional): Defaults to the settings read from the environment.

    Returns:
        FastAPI: The configured application. Its engine, session factory and
        settings are available on ``app.state``.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.API_VERSION)
    app.state.settings = settings
    app.state.engine = get_engine(build_sqlalchemy_database_url_from_settings(settings))
    app.state.session_factory = get_local_session(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    app.include_router(goals_router, prefix="/goals", tags=["Goals"])
    app.include_router(progress_router, prefix="/progress", tags=["Progress"])
    app.include_router(ai_router, prefix="/ai", tags=["AI Coach"])
    app.include_router(users_router, prefix="/users", tags=["User"])

    #####################
    ### Root Endpoint ###
    #####################
    @app.get("/")
    def read_root():
        return {"name": settings.PROJECT_NAME, "environment": settings.ENV, "version": settings.API_VERSION, "docs": "/docs"}

    @app.get("/health")
    def health():
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "environment": settings.ENV,
        }

    log.info("%s %s started (%s)", settings.PROJECT_NAME, settings.API_VERSION, settings.ENV)
    return app


app = create_app()
