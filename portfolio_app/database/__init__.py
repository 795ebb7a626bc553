"""
Database module: engine, session factory and declarative base.
"""

from .connection import Base, SessionLocal, engine, get_db, utcnow

__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "utcnow",
]
