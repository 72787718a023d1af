"""
Schemas - Wire and Structured Output Models

Defines the activity models exchanged with the channel and the Pydantic
model used for structured LLM slot extraction.
"""

from slot_filling_bot.schemas.activities import (
    Activity,
    ActivityTypes,
    ChannelAccount,
    InputHints,
)
from slot_filling_bot.schemas.decisions import SlotExtraction

__all__ = [
    "Activity",
    "ActivityTypes",
    "ChannelAccount",
    "InputHints",
    "SlotExtraction",
]
