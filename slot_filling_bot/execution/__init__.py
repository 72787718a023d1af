"""
Execution Layer - Dialog Stack and Slot Filling

Defines the dialog machinery: the DialogContext managing the dialog stack,
the SlotFillingDialog (deterministic recursive state machine), the prompts
that fill scalar slots, and the presentation step that summarizes results.
"""

from slot_filling_bot.execution.dialog_context import (
    Dialog,
    DialogContext,
    DialogSet,
    TurnContext,
)
from slot_filling_bot.execution.engine import (
    BranchingSlotSelector,
    SequentialSlotSelector,
    SlotFillingDialog,
    SlotSelector,
)
from slot_filling_bot.execution.presentation import PresentationDialog
from slot_filling_bot.execution.schemas.state_machine import DialogTurnResult, DialogTurnStatus
from slot_filling_bot.execution.slot_prompts import (
    ChoicePrompt,
    NumberPrompt,
    Prompt,
    PromptRecognizerResult,
    PromptValidatorContext,
    TextPrompt,
)
from slot_filling_bot.execution.validators import range_validator, shoe_size_validator


__all__ = [
    "Dialog",
    "DialogContext",
    "DialogSet",
    "TurnContext",
    "BranchingSlotSelector",
    "SequentialSlotSelector",
    "SlotFillingDialog",
    "SlotSelector",
    "PresentationDialog",
    "DialogTurnResult",
    "DialogTurnStatus",
    "ChoicePrompt",
    "NumberPrompt",
    "Prompt",
    "PromptRecognizerResult",
    "PromptValidatorContext",
    "TextPrompt",
    "range_validator",
    "shoe_size_validator",
]
