import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import Database, create_database
from app.core.errors import register_exception_handlers
from app.core.logging_config import request_logging_middleware, setup_logging
from app.api.endpoints import auth, health, jobs

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up Job Board API...")
    owns_database = app.state.database is None
    if owns_database:
        app.state.database = create_database(settings)
    app.state.database.create_all()
    logger.info("Database initialized successfully")

    yield

    # Shutdown
    logger.info("Shutting down Job Board API...")
    if owns_database:
        app.state.database.dispose()


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        database: Database to serve from. When omitted, one is built from
            settings at startup.
    """
    setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Job board API: employers post listings, job seekers browse them",
        lifespan=lifespan
    )
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(request_logging_middleware)
    register_exception_handlers(app)

    app.include_router(auth.router, prefix=settings.API_V1_STR)
    app.include_router(jobs.router, prefix=settings.API_V1_STR)
    app.include_router(health.router)

    @app.get("/")
    async def root():
        """Root endpoint - API health check"""
        return {
            "message": "Job Board API",
            "version": "1.0.0",
            "status": "healthy"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
