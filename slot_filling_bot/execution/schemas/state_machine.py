"""
Turn Outcomes - Dialog State Machine Results

Type definitions for what happened to the dialog stack during one
operation (begin / continue / resume / cancel). Used by the dialogs to
report suspension and completion, and by the turn dispatcher to decide
what to do next.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional


class DialogTurnStatus(Enum):
    """
    Strict State Machine terminology describing the stack after an operation.
    """

    EMPTY = auto()  # No dialog was on the stack.
    WAITING = auto()  # A dialog rendered output and is suspended on user input.
    COMPLETE = auto()  # The dialog ended; `result` carries its value.
    CANCELLED = auto()  # The flow was cancelled and the stack unwound.


@dataclass
class DialogTurnResult:
    """
    Outcome of a dialog operation.

    `result` is set for COMPLETE, `pending_dialog_id` names the dialog that
    is waiting for input when status is WAITING.
    """

    status: DialogTurnStatus
    result: Optional[Any] = None
    pending_dialog_id: Optional[str] = None
