import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, Optional

from pydantic import ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

# Runtime & Infra Imports
from ..state.models import ConversationState
from ..services.exceptions import PersistenceError
from ..infrastructure.database.tables import ConversationStateDBModel

logger = logging.getLogger(__name__)


class ConversationStateRepository(ABC):
    """
    Defines how the turn dispatcher reads and writes conversation state.
    This allows us change where the dialog stack lives (Memory -> SQL -> KV store)
    without changing the dialog code.

    Implementations raise PersistenceError when the store is unavailable.
    """

    @abstractmethod
    def load(self, conversation_id: str) -> ConversationState:
        """Returns the saved state, or a fresh empty state for unknown ids."""
        pass

    @abstractmethod
    def save(self, state: ConversationState):
        """Persists the whole state in one write (all-or-nothing)."""
        pass

    @abstractmethod
    def delete(self, conversation_id: str) -> bool:
        """Deletes a conversation. Returns True if found and deleted."""
        pass


class InMemoryConversationStateRepository(ConversationStateRepository):
    """
    Keeps serialized JSON blobs in a dictionary, for testing/dev purposes.
    Live objects are never stored, so every turn really round-trips
    through serialization.
    """

    def __init__(self):
        self._store: Dict[str, str] = {}

    def load(self, conversation_id: str) -> ConversationState:
        blob = self._store.get(conversation_id)
        if blob is None:
            return ConversationState(conversation_id=conversation_id)
        try:
            return ConversationState.model_validate_json(blob)
        except ValidationError as e:
            logger.error(f"Stored state of conversation {conversation_id} is corrupt: {e}")
            raise PersistenceError(f"Stored state of conversation {conversation_id} is corrupt.") from e

    def save(self, state: ConversationState):
        self._store[state.conversation_id] = state.model_dump_json()

    def delete(self, conversation_id: str) -> bool:
        if conversation_id in self._store:
            del self._store[conversation_id]
            return True
        return False

    def raw(self, conversation_id: str) -> Optional[dict]:
        """The stored blob, decoded. Mostly useful in tests."""
        blob = self._store.get(conversation_id)
        return json.loads(blob) if blob is not None else None


class SqlConversationStateRepository(ConversationStateRepository):
    """
    SQL storage (JSONB on PostgreSQL) for conversation state.
    """

    def __init__(self, db_engine: Optional[Engine] = None):
        if db_engine is None:
            from ..infrastructure.database.connection import engine as db_engine
        self.engine = db_engine

    def load(self, conversation_id: str) -> ConversationState:
        try:
            with Session(self.engine) as db:
                statement = select(ConversationStateDBModel).where(
                    ConversationStateDBModel.conversation_id == conversation_id
                )
                result = db.exec(statement).first()

                if not result:
                    return ConversationState(conversation_id=conversation_id)

                # Deserialize JSON back into the Pydantic runtime model
                return ConversationState.model_validate(result.state)
        except SQLAlchemyError as e:
            logger.error(f"Loading conversation {conversation_id} failed: {e}")
            raise PersistenceError(f"Could not load conversation {conversation_id}.") from e
        except ValidationError as e:
            logger.error(f"Stored state of conversation {conversation_id} is corrupt: {e}")
            raise PersistenceError(f"Stored state of conversation {conversation_id} is corrupt.") from e

    def save(self, state: ConversationState):
        blob = state.model_dump(mode="json")
        try:
            with Session(self.engine) as db:
                statement = select(ConversationStateDBModel).where(
                    ConversationStateDBModel.conversation_id == state.conversation_id
                )
                result = db.exec(statement).first()

                if result:
                    # Update the JSON blob and the timestamp
                    result.state = blob
                    result.updated_at = datetime.now(timezone.utc)
                else:
                    result = ConversationStateDBModel(
                        conversation_id=state.conversation_id, state=blob
                    )
                db.add(result)
                db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Saving conversation {state.conversation_id} failed: {e}")
            raise PersistenceError(f"Could not save conversation {state.conversation_id}.") from e

    def delete(self, conversation_id: str) -> bool:
        try:
            with Session(self.engine) as db:
                statement = select(ConversationStateDBModel).where(
                    ConversationStateDBModel.conversation_id == conversation_id
                )
                result = db.exec(statement).first()

                if result:
                    db.delete(result)
                    db.commit()
                    return True
                return False
        except SQLAlchemyError as e:
            logger.error(f"Deleting conversation {conversation_id} failed: {e}")
            raise PersistenceError(f"Could not delete conversation {conversation_id}.") from e
