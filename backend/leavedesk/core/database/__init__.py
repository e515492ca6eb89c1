"""
Database module - engine/session clients and the FastAPI session dependency
"""
import logging
from typing import Generator
from fastapi import HTTPException, Request, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, declarative_base
from leavedesk.core.database.base import DatabaseClient
from leavedesk.core.database.postgres_client import PostgreSQLClient
from leavedesk.core.database.sqlite_client import SQLiteClient
from leavedesk.core.config import Settings

logger = logging.getLogger(__name__)

# SQLAlchemy Base for models
Base = declarative_base()

# SQLSTATE codes raised by PostgreSQL for constraint violations
NOT_NULL_VIOLATION = "23502"
UNIQUE_VIOLATION = "23505"

def create_client(settings: Settings) -> DatabaseClient:
    """Build the client matching the configured URL scheme"""
    url = settings.database_url
    if url.startswith("sqlite"):
        return SQLiteClient(url)
    return PostgreSQLClient(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE_SECONDS,
    )

def init_db(client: DatabaseClient) -> None:
    """Create missing tables. Safe to run on every start."""
    # Models must be imported so they register on Base.metadata
    import leavedesk.models  # noqa: F401

    if not client.is_connected:
        client.connect()
    Base.metadata.create_all(bind=client.engine)
    logger.info("Schema ready (%s)", ", ".join(sorted(Base.metadata.tables)))

def get_db(request: Request) -> Generator[Session, None, None]:
    """Get database session from the client stored on the app - FastAPI dependency"""
    client = getattr(request.app.state, "db_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database not initialized"
        )
    session = client.get_session()
    try:
        yield session
    finally:
        session.close()

def integrity_error_kind(exc: IntegrityError) -> str:
    """
    Classify a constraint violation as "not_null", "unique" or "other".
    Uses the SQLSTATE when the driver exposes one, else the driver message.
    """
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code == NOT_NULL_VIOLATION:
        return "not_null"
    if code == UNIQUE_VIOLATION:
        return "unique"

    message = str(orig if orig is not None else exc).lower()
    if "not null" in message or "not-null" in message:
        return "not_null"
    if "unique" in message or "duplicate" in message:
        return "unique"
    return "other"

__all__ = [
    "Base",
    "DatabaseClient",
    "PostgreSQLClient",
    "SQLiteClient",
    "create_client",
    "init_db",
    "get_db",
    "integrity_error_kind",
]
