from typing import Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import Settings

# Create Base class for models
Base = declarative_base()


class Database:
    """
    Owns the SQLAlchemy engine and session factory.

    Built explicitly by the application factory (or by tests) and stored on
    ``app.state.database``; nothing connects at import time.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine: Engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def create_all(self) -> None:
        """Create every table registered on Base."""
        from app.models import job, user  # noqa: F401  Import models to register them
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def create_database(settings: Settings, url: Optional[str] = None) -> Database:
    """
    Build a Database from settings.

    PostgreSQL gets a pooled engine; SQLite URLs (local runs) get the
    thread check disabled so FastAPI's threadpool can share connections.
    """
    url = url or settings.DATABASE_URL
    if url.startswith("sqlite"):
        return Database(url, connect_args={"check_same_thread": False})

    return Database(
        url,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,
        max_overflow=20
    )


def get_db(request: Request):
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
