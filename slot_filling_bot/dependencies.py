"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the bot's services.
It is responsible for:
1. Instantiating the shared services (LLM adapter, dialog set, state store).
2. Wiring them together (injecting the store and dialogs into the bot).
3. Managing the lifecycle of these objects using @lru_cache so they are
   created only once per process.

None of these objects hold conversation data: dialogs are stateless and the
state store is the only place a conversation lives between turns.
"""

from functools import lru_cache
from typing import Optional

from .config import settings
from .llm.interface import LLMProvider
from .llm.adapters.openai_adapter import OpenAIAdapter
from .execution.dialog_context import DialogSet
from .data.profile_dialogs import build_dialog_set
from .repositories.conversation_state import (
    ConversationStateRepository,
    InMemoryConversationStateRepository,
    SqlConversationStateRepository,
)
from .services.bot import SlotFillingBot

# LLM Provider (Singleton, optional)
@lru_cache()
def get_llm_provider() -> Optional[LLMProvider]:
    if not settings.OPENAI_API_KEY:
        return None
    return OpenAIAdapter(
        api_key=settings.OPENAI_API_KEY,
        model_name=settings.OPENAI_MODEL
    )

# Dialog Set (Singleton)
@lru_cache()
def get_dialog_set() -> DialogSet:
    return build_dialog_set(llm_provider=get_llm_provider())

# Conversation State Store (Singleton)
# Note: In-memory storage must be a singleton so data persists across turns!
@lru_cache()
def get_state_repository() -> ConversationStateRepository:
    if settings.STATE_BACKEND == "sql":
        return SqlConversationStateRepository()
    return InMemoryConversationStateRepository()

# The Bot (Singleton Service)
@lru_cache()
def get_bot() -> SlotFillingBot:
    """
    Injects the state store and the dialog set into the turn dispatcher.
    """
    return SlotFillingBot(
        state_repository=get_state_repository(),
        dialogs=get_dialog_set(),
        root_dialog_id=settings.ROOT_DIALOG_ID,
    )
