"""
Database Connection Manager.

This module handles the low-level details of connecting to the SQL database
that backs the conversation state store. It exposes the SQLModel engine
used by the SQL repository.
"""

from sqlalchemy.engine import Engine
from sqlmodel import create_engine, SQLModel
from ...config import settings

# echo=False in production to avoid leaking conversation content in logs
engine = create_engine(settings.DATABASE_URL, echo=False)


def init_db(db_engine: Engine = engine):
    """
    Idempotent initialization.
    Creates tables if they do not exist.
    Useful for local dev or simple deployments.
    """
    # Registers the table models on SQLModel.metadata
    from . import tables  # noqa: F401

    SQLModel.metadata.create_all(db_engine)
