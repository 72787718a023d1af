"""
State Layer - Runtime Data Models

Defines the runtime state persisted between turns: the dialog stack,
the per-engine slot fill state and the aggregated result tree.
"""

from slot_filling_bot.state.models import (
    ConversationState,
    DialogFrame,
    FilledValue,
    PromptState,
    SlotFillResult,
    SlotFillState,
)

__all__ = [
    "ConversationState",
    "DialogFrame",
    "FilledValue",
    "PromptState",
    "SlotFillResult",
    "SlotFillState",
]
