"""Shared pytest fixtures for testing."""

from typing import Awaitable, Callable, List, Tuple

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from slot_filling_bot.data.profile_dialogs import build_dialog_set
from slot_filling_bot.execution import DialogContext, DialogSet, DialogTurnResult, TurnContext
from slot_filling_bot.infrastructure.database.connection import init_db
from slot_filling_bot.recognizers import RecognitionCandidate, Recognizer
from slot_filling_bot.repositories.conversation_state import InMemoryConversationStateRepository
from slot_filling_bot.schemas import Activity
from slot_filling_bot.services.bot import SlotFillingBot
from slot_filling_bot.state import ConversationState


class DialogDriver:
    """
    Drives a DialogSet turn by turn without the bot. The conversation state
    is kept as a JSON blob between turns, like a real state store does.
    """

    def __init__(self, dialogs: DialogSet, conversation_id: str = "test-conversation"):
        self.dialogs = dialogs
        self.blob = ConversationState(conversation_id=conversation_id).model_dump_json()

    @property
    def state(self) -> ConversationState:
        return ConversationState.model_validate_json(self.blob)

    async def _run(
        self, activity: Activity, action: Callable[[DialogContext], Awaitable[DialogTurnResult]]
    ) -> Tuple[DialogTurnResult, List[Activity]]:
        state = self.state
        turn = TurnContext(activity)
        result = await action(self.dialogs.create_context(turn, state))
        self.blob = state.model_dump_json()
        return result, turn.responses

    async def begin(self, dialog_id: str, options=None):
        return await self._run(Activity.message(""), lambda dc: dc.begin_dialog(dialog_id, options))

    async def send(self, text: str, locale: str = None):
        return await self._run(Activity.message(text, locale=locale), lambda dc: dc.continue_dialog())

    async def send_activity(self, activity: Activity):
        return await self._run(activity, lambda dc: dc.continue_dialog())

    async def cancel(self):
        return await self._run(Activity.message("cancel"), lambda dc: dc.cancel_all_dialogs())


class StubRecognizer(Recognizer):
    """Returns canned candidates, whatever the input."""

    def __init__(self, *resolutions):
        self.resolutions = resolutions
        self.calls = []

    async def recognize(self, text, locale):
        self.calls.append((text, locale))
        return [RecognitionCandidate(text=text, resolution=r, type_name="stub") for r in self.resolutions]


def texts(activities: List[Activity]) -> List[str]:
    return [activity.text for activity in activities]


@pytest.fixture
def make_driver():
    return DialogDriver


@pytest.fixture
def profile_dialogs() -> DialogSet:
    return build_dialog_set()


@pytest.fixture
def state_repository() -> InMemoryConversationStateRepository:
    return InMemoryConversationStateRepository()


@pytest.fixture
def bot(state_repository, profile_dialogs) -> SlotFillingBot:
    return SlotFillingBot(state_repository=state_repository, dialogs=profile_dialogs)


@pytest.fixture
def sql_engine():
    """In-memory SQLite shared by every connection of the test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()
