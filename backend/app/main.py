"""Resume Builder — FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from app.config import Settings, configure_logging, settings as default_settings
from app.database import Database
from app.errors import register_error_handlers
from app.routers import auth, users, resumes, templates
from app.services.template_service import seed_default_templates

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the application around an explicit settings object and database handle."""
    settings = settings or default_settings
    # A database handed in by the caller is theirs to dispose
    owns_database = database is None
    database = database or Database(settings.DATABASE_URL)
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            database.ping()
            database.create_all()
        except SQLAlchemyError:
            # An unreachable store at startup is fatal
            logger.exception("Database connection failed (%s)", database.engine.url.render_as_string(hide_password=True))
            raise SystemExit(1)
        logger.info("Database connected: %s", database.engine.url.render_as_string(hide_password=True))

        if settings.SEED_TEMPLATES_ON_STARTUP:
            with database.SessionLocal() as db:
                seed_default_templates(db)

        yield
        if owns_database:
            database.dispose()

    app = FastAPI(
        title="Resume Builder API",
        description="Resumes built from templates, owned by their users.",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = database

    register_error_handlers(app)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(users.router)
    app.include_router(auth.router)
    app.include_router(resumes.router)
    app.include_router(templates.router)

    @app.get("/")
    def root():
        return {
            "name": "Resume Builder API",
            "version": VERSION,
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve ``app`` with uvicorn."""
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=5000)
