"""
Bot Service - Turn Dispatch Layer

This service is the entry point for every incoming activity. It loads the
conversation's dialog stack, routes the activity to the active dialog (or
starts the root flow), and saves the stack again. The save happens exactly
once per turn, whatever happened before it.
"""

import logging
from typing import List

from ..config import settings
from ..execution.dialog_context import DialogContext, DialogSet, TurnContext
from ..repositories.conversation_state import ConversationStateRepository
from ..schemas.activities import Activity, ActivityTypes
from .exceptions import StructuralConfigurationError

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "This is a bot that demonstrates an alternate dialog system "
    "which uses a slot filling technique to collect multiple responses from a user. "
    "Say anything to continue."
)
CANCELLED_TEXT = "Ok... canceled."
NOTHING_TO_CANCEL_TEXT = "Nothing to cancel."


class SlotFillingBot:
    def __init__(
        self,
        state_repository: ConversationStateRepository,
        dialogs: DialogSet,
        root_dialog_id: str = "root",
    ):
        self.state_repo = state_repository
        self.dialogs = dialogs
        self.root_dialog_id = root_dialog_id

    async def on_turn(self, conversation_id: str, activity: Activity) -> List[Activity]:
        """
        The Core Loop:
        1. Load the conversation state
        2. Dispatch on the activity type
        3. Save the conversation state (always, exactly once)
        4. Return the outgoing activities

        Raises StructuralConfigurationError for a malformed dialog set and
        PersistenceError when the state store fails; the turn may then be
        re-delivered.
        """
        state = self.state_repo.load(conversation_id)
        turn = TurnContext(activity)
        dc = self.dialogs.create_context(turn, state)

        try:
            if activity.type == ActivityTypes.MESSAGE:
                await self._on_message(dc)
            elif activity.type == ActivityTypes.CONVERSATION_UPDATE:
                await self._on_conversation_update(dc)
        except StructuralConfigurationError as e:
            # Never persist a stack that cannot be resumed
            logger.error(f"Flow of conversation {conversation_id} failed: {e}")
            state.stack.clear()
            raise
        finally:
            self.state_repo.save(state)

        return turn.responses

    async def _on_message(self, dc: DialogContext):
        utterance = (dc.turn.activity.text or "").strip().lower()

        if utterance == settings.CANCEL_KEYWORD:
            if dc.active_frame:
                await dc.cancel_all_dialogs()
                dc.turn.send_activity(CANCELLED_TEXT)
            else:
                dc.turn.send_activity(NOTHING_TO_CANCEL_TEXT)

        if not dc.turn.responded:
            # Continue the current dialog if one is pending
            await dc.continue_dialog()

        if not dc.turn.responded and not dc.active_frame:
            # Nothing pending: start the flow fresh
            logger.info(f"Starting '{self.root_dialog_id}' for conversation {dc.state.conversation_id}")
            await dc.begin_dialog(self.root_dialog_id)

    async def _on_conversation_update(self, dc: DialogContext):
        joined = [member for member in dc.turn.activity.members_added if member.name != settings.BOT_NAME]
        if not joined:
            return

        # Send a "this is what the bot does" message
        dc.turn.send_activity(DESCRIPTION)

        if settings.AUTO_BEGIN_ON_JOIN and not dc.active_frame:
            await dc.begin_dialog(self.root_dialog_id)
