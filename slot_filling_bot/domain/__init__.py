"""
Domain Layer - Static Data Models

Defines the declarative slot schema: SlotDetails, SlotSet and the
PromptOptions used by the prompts that fill scalar slots.
"""

from slot_filling_bot.domain.models import (
    PromptOptions,
    SlotDetails,
    SlotSet,
)

__all__ = [
    "PromptOptions",
    "SlotDetails",
    "SlotSet",
]
