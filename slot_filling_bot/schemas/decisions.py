"""
Schemas - Structured Output Models for LLM Responses

This module defines the Pydantic model used when a slot is recognized by
an LLM. The schema enforces strict JSON formatting on the LLM response so the
LLMSlotRecognizer gets a predictable, parseable result.
"""
from typing import Optional
from pydantic import BaseModel, Field

class SlotExtraction(BaseModel):
    """
    The strict JSON structure the LLM must generate when asked to read one
    slot value out of the user's answer.
    """
    found: bool = Field(
        ...,
        description="True only if the answer contains a usable value for the slot."
    )
    value: Optional[str] = Field(
        None,
        description="The extracted value, normalized as plain text. Null when found is false."
    )
    reasoning: str = Field(
        ...,
        description="Brief internal justification of the extraction."
    )
