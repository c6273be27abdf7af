# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""SQLAlchemy engine singleton."""
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from meeting_service.core.config import settings


def build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        # SQLite pools do not take size/overflow arguments
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_recycle=settings.POOL_RECYCLE,
    )


def ping(db: Engine) -> str:
    """Round-trip ``SELECT 1``; returns the backend name. Errors propagate."""
    with db.connect() as conn:
        conn.execute(text("SELECT 1"))
    return db.dialect.name


engine = build_engine(settings.DATABASE_URL)
