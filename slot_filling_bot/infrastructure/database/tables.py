"""
Database Table Definitions.

This module defines the SQL schema using SQLModel.
We use the 'DBModel' suffix to distinguish these persistence models
from the Pydantic runtime models (ConversationState).
"""

from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import JSON, Column
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ConversationStateDBModel(SQLModel, table=True):
    """
    Persistence model for the dialog stack of one conversation.
    Maps 1-to-1 with the 'conversation_states' table.
    """

    __tablename__ = "conversation_states"

    conversation_id: str = Field(primary_key=True, index=True)

    # The whole ConversationState (stack + frame states) as one blob.
    # JSONB on PostgreSQL, plain JSON elsewhere (e.g. SQLite in tests).
    state: Dict[str, Any] = Field(
        sa_column=Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)
    )

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
