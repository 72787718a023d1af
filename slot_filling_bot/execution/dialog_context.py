"""
Dialog Context - Dialog Stack Management

A turn is processed against a DialogContext: the incoming activity (wrapped
in a TurnContext that collects the outgoing activities), the registry of
dialogs (DialogSet) and the conversation's persisted dialog stack.

Dialog objects are stateless and shared between conversations. Everything a
suspended dialog needs on the next turn lives in its DialogFrame.state.

Stack discipline:
1. begin_dialog pushes a frame and calls Dialog.begin on it.
2. continue_dialog calls Dialog.continue_turn on the top frame.
3. end_dialog pops the top frame and hands the result to the new top
   (Dialog.resume_child), or returns COMPLETE when the stack is empty.
4. cancel_all_dialogs unwinds every frame, innermost first.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..schemas.activities import Activity, ActivityTypes, InputHints
from ..services.exceptions import StructuralConfigurationError, UnknownDialogError
from ..state.models import ConversationState, DialogFrame
from .schemas.state_machine import DialogTurnResult, DialogTurnStatus

logger = logging.getLogger(__name__)


class TurnContext:
    """Incoming activity plus the activities sent back during this turn."""

    def __init__(self, activity: Activity):
        self.activity = activity
        self.responses: List[Activity] = []

    @property
    def responded(self) -> bool:
        return bool(self.responses)

    @property
    def is_message(self) -> bool:
        return self.activity.type == ActivityTypes.MESSAGE

    def send_activity(
        self,
        text: str,
        input_hint: InputHints = InputHints.ACCEPTING_INPUT,
        suggested_actions: Optional[List[str]] = None,
    ) -> Activity:
        reply = Activity(
            type=ActivityTypes.MESSAGE,
            text=text,
            locale=self.activity.locale,
            input_hint=input_hint,
            suggested_actions=list(suggested_actions or []),
        )
        self.responses.append(reply)
        return reply


class Dialog(ABC):
    """
    Base class of everything that can sit on the dialog stack:
    prompts, slot-filling engines and the presentation step.
    """

    def __init__(self, dialog_id: str):
        self.id = dialog_id

    @abstractmethod
    async def begin(self, dc: "DialogContext", options: Optional[Any] = None) -> DialogTurnResult:
        """Called right after the dialog's frame was pushed."""

    async def continue_turn(self, dc: "DialogContext") -> DialogTurnResult:
        """Called when a new activity arrives and this dialog is on top."""
        return await dc.end_dialog()

    async def resume_child(self, dc: "DialogContext", result: Any) -> DialogTurnResult:
        """Called when a dialog started by this one ended with `result`."""
        return await dc.end_dialog(result)

    async def cancel(self, dc: "DialogContext", frame: DialogFrame) -> None:
        """Called before the frame is discarded by a cancellation."""

    def dependencies(self) -> List[str]:
        """Ids of the dialogs this dialog may begin."""
        return []


class DialogSet:
    """
    Registry of the dialogs known to the bot, addressed by id.
    """

    def __init__(self, dialogs: Optional[List[Dialog]] = None):
        self._dialogs: Dict[str, Dialog] = {}
        for dialog in dialogs or []:
            self.add(dialog)

    def add(self, dialog: Dialog) -> Dialog:
        if dialog.id in self._dialogs:
            raise StructuralConfigurationError(f"Dialog id '{dialog.id}' is registered twice.")
        self._dialogs[dialog.id] = dialog
        return dialog

    def find(self, dialog_id: str) -> Dialog:
        dialog = self._dialogs.get(dialog_id)
        if dialog is None:
            raise UnknownDialogError(dialog_id)
        return dialog

    def __contains__(self, dialog_id: str) -> bool:
        return dialog_id in self._dialogs

    def validate(self) -> None:
        """
        Fails fast on references to unregistered dialogs.
        Raises UnknownDialogError.
        """
        for dialog in self._dialogs.values():
            for dependency in dialog.dependencies():
                if dependency not in self._dialogs:
                    raise UnknownDialogError(dependency)

    def create_context(self, turn: TurnContext, state: ConversationState) -> "DialogContext":
        return DialogContext(self, turn, state)


class DialogContext:
    def __init__(self, dialogs: DialogSet, turn: TurnContext, state: ConversationState):
        self.dialogs = dialogs
        self.turn = turn
        self.state = state

    @property
    def stack(self) -> List[DialogFrame]:
        return self.state.stack

    @property
    def active_frame(self) -> Optional[DialogFrame]:
        return self.state.active_frame

    async def begin_dialog(self, dialog_id: str, options: Optional[Any] = None) -> DialogTurnResult:
        # Resolve before pushing so an unknown id never lands on the stack
        dialog = self.dialogs.find(dialog_id)
        self.stack.append(DialogFrame(dialog_id=dialog_id))
        logger.debug(f"Pushed '{dialog_id}' (depth {len(self.stack)})")
        return await dialog.begin(self, options)

    async def continue_dialog(self) -> DialogTurnResult:
        frame = self.active_frame
        if frame is None:
            return DialogTurnResult(status=DialogTurnStatus.EMPTY)

        dialog = self.dialogs.find(frame.dialog_id)
        return await dialog.continue_turn(self)

    async def end_dialog(self, result: Optional[Any] = None) -> DialogTurnResult:
        frame = self.stack.pop()
        logger.debug(f"Popped '{frame.dialog_id}' (depth {len(self.stack)})")

        parent = self.active_frame
        if parent is None:
            return DialogTurnResult(status=DialogTurnStatus.COMPLETE, result=result)

        dialog = self.dialogs.find(parent.dialog_id)
        return await dialog.resume_child(self, result)

    async def cancel_all_dialogs(self) -> DialogTurnResult:
        if not self.stack:
            return DialogTurnResult(status=DialogTurnStatus.EMPTY)

        while self.stack:
            frame = self.stack[-1]
            # A frame left over from an older dialog set is dropped without its hook
            if frame.dialog_id in self.dialogs:
                await self.dialogs.find(frame.dialog_id).cancel(self, frame)
            self.stack.pop()

        logger.info(f"Cancelled all dialogs of conversation {self.state.conversation_id}")
        return DialogTurnResult(status=DialogTurnStatus.CANCELLED)
