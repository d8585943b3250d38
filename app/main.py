import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.api import api_router
from app.core.config import Settings, settings as default_settings
from app.core.database import create_memory_engine, create_session_factory
from app.core.logging import setup_logging
from app.repositories.user_repository import create_user, get_user_by_username
from app.schemas.user import UserCreate

# Register tables on Base.metadata before create_all runs
from app.models import schema, shared_query, sql_query, user  # noqa: F401

logger = logging.getLogger(__name__)


def seed_default_user(session_factory, settings: Settings):
    db = session_factory()
    try:
        if not get_user_by_username(db, settings.DEFAULT_USERNAME):
            create_user(db, UserCreate(
                username=settings.DEFAULT_USERNAME,
                email=settings.DEFAULT_EMAIL,
                password=settings.DEFAULT_PASSWORD,
            ))
    finally:
        db.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API together with its own in-memory store."""
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="AI SQL Assistant",
        description="Generate, transform, explain and format SQL",
        version="1.0.0"
    )

    app.state.settings = settings
    app.state.session_factory = create_session_factory(create_memory_engine())
    seed_default_user(app.state.session_factory, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": str(exc) or "Internal server error"})

    app.include_router(api_router, prefix="/api")

    @app.get("/")
    def root():
        return {"message": "AI SQL Assistant API"}

    logger.info("AI SQL Assistant ready (model: %s)", settings.OPENAI_MODEL_NAME)
    return app


app = create_app()
