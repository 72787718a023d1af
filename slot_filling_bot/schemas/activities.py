"""
Schemas - Inbound and Outbound Activities

Pydantic models for the messages exchanged with the (external) channel.
The dialog core only inspects `type`, `text`, `locale` and `members_added`.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ActivityTypes(str, Enum):
    MESSAGE = "message"
    CONVERSATION_UPDATE = "conversationUpdate"


class InputHints(str, Enum):
    """Tells the channel whether the bot now waits for an answer."""
    ACCEPTING_INPUT = "acceptingInput"
    EXPECTING_INPUT = "expectingInput"


class ChannelAccount(BaseModel):
    name: str


class Activity(BaseModel):
    type: ActivityTypes = ActivityTypes.MESSAGE
    text: Optional[str] = None
    locale: Optional[str] = None
    members_added: List[ChannelAccount] = Field(default_factory=list)

    # Outbound only
    suggested_actions: List[str] = Field(default_factory=list)
    input_hint: InputHints = InputHints.ACCEPTING_INPUT

    @classmethod
    def message(cls, text: str, locale: Optional[str] = None) -> "Activity":
        return cls(type=ActivityTypes.MESSAGE, text=text, locale=locale)

    @classmethod
    def members_joined(cls, *names: str) -> "Activity":
        return cls(
            type=ActivityTypes.CONVERSATION_UPDATE,
            members_added=[ChannelAccount(name=name) for name in names],
        )
