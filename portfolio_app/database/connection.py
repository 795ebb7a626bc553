from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from portfolio_app.config import settings


def _connect_args(database_url: str) -> dict:
    """SQLite connections are shared across FastAPI's worker threads"""
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    connect_args=_connect_args(settings.database_url),
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def utcnow() -> datetime:
    """
    Current time as a naive UTC datetime.
    
    Every timestamp column stores naive UTC so that comparisons and
    DATE() grouping behave the same on SQLite and PostgreSQL.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def get_db():
    """
    FastAPI dependency yielding one session per request.
    The session is always closed, even when the handler raises.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
