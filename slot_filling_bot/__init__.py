"""
Slot-Filling Bot

A conversational bot that collects a nested set of values ("slots") from a
user over several turns, using a recursive slot-filling dialog state machine
on top of a persisted dialog stack.
"""

from slot_filling_bot.domain import (
    PromptOptions,
    SlotDetails,
    SlotSet,
)
from slot_filling_bot.state import (
    ConversationState,
    DialogFrame,
    SlotFillResult,
    SlotFillState,
)
from slot_filling_bot.schemas import Activity, ActivityTypes
from slot_filling_bot.execution import (
    ChoicePrompt,
    DialogSet,
    DialogTurnStatus,
    NumberPrompt,
    PresentationDialog,
    SlotFillingDialog,
    TextPrompt,
)
from slot_filling_bot.services.bot import SlotFillingBot

__all__ = [
    # Domain Layer
    "PromptOptions",
    "SlotDetails",
    "SlotSet",
    # State Layer
    "ConversationState",
    "DialogFrame",
    "SlotFillResult",
    "SlotFillState",
    # Schemas
    "Activity",
    "ActivityTypes",
    # Execution Layer
    "ChoicePrompt",
    "DialogSet",
    "DialogTurnStatus",
    "NumberPrompt",
    "PresentationDialog",
    "SlotFillingDialog",
    "TextPrompt",
    # Service Layer
    "SlotFillingBot",
]
