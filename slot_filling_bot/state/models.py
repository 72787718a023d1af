"""
State Layer - Runtime Data Models

This module defines the runtime state that tracks a conversation between
turns. It implements a Dialog Stack (call stack) of frames: the turn
dispatcher, slot-filling engines and prompts each own one frame while they
are suspended, nested arbitrarily deep. Everything here is serialized to
the conversation state store at the end of every turn.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class SlotFillResult(BaseModel):
    """
    Result tree produced by a slot-filling engine.
    Composite slots hold a nested SlotFillResult, scalar slots the
    recognized value.
    """
    values: Dict[str, "FilledValue"] = Field(default_factory=dict)

    def __getitem__(self, name: str) -> "FilledValue":
        return self.values[name]

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict view, e.g. {"fullname": {"first": "John"}}."""
        return {
            name: value.to_dict() if isinstance(value, SlotFillResult) else value
            for name, value in self.values.items()
        }


# Tagged union: nested tree (composite slot) or scalar (prompt result).
FilledValue = Union[SlotFillResult, bool, int, float, str]

SlotFillResult.model_rebuild()


class SlotFillState(BaseModel):
    """
    Private state of one slot-filling engine invocation.
    """
    values: Dict[str, FilledValue] = Field(default_factory=dict)
    next_index: int = 0

    # Name of the slot whose filler is currently on top of this frame
    active_slot: Optional[str] = None


class PromptState(BaseModel):
    """
    Private state of a suspended prompt (its retry context).
    """
    options: Dict[str, Any] = Field(default_factory=dict)
    attempt_count: int = 0


class DialogFrame(BaseModel):
    """
    Represents a single item on the dialog stack.
    """
    dialog_id: str
    state: Dict[str, Any] = Field(default_factory=dict)


class ConversationState(BaseModel):
    """
    The persisted state for a single conversation.
    """
    conversation_id: str
    stack: List[DialogFrame] = Field(default_factory=list)

    @property
    def active_frame(self) -> Optional[DialogFrame]:
        if not self.stack:
            return None
        return self.stack[-1]
