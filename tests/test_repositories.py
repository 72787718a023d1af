import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from slot_filling_bot.repositories.conversation_state import (
    InMemoryConversationStateRepository,
    SqlConversationStateRepository,
)
from slot_filling_bot.services.exceptions import PersistenceError
from slot_filling_bot.state import ConversationState, DialogFrame, SlotFillResult, SlotFillState


def in_progress_state(conversation_id="c1") -> ConversationState:
    engine_state = SlotFillState(
        values={
            "fullname": SlotFillResult(values={"first": "John", "last": "Smith"}),
            "shoesize": 9.5,
        },
        next_index=2,
        active_slot="address",
    )
    return ConversationState(
        conversation_id=conversation_id,
        stack=[
            DialogFrame(dialog_id="root", state={"stage": 0}),
            DialogFrame(dialog_id="profile", state=engine_state.model_dump(mode="json")),
        ],
    )


@pytest.fixture(params=["memory", "sql"])
def repository(request, sql_engine):
    if request.param == "memory":
        return InMemoryConversationStateRepository()
    return SqlConversationStateRepository(sql_engine)


def test_unknown_conversation_loads_empty(repository):
    state = repository.load("unknown")

    assert state.conversation_id == "unknown"
    assert state.stack == []
    assert state.active_frame is None


def test_saved_state_round_trips(repository):
    repository.save(in_progress_state())

    loaded = repository.load("c1")

    assert loaded == in_progress_state()
    engine_state = SlotFillState.model_validate(loaded.active_frame.state)
    assert isinstance(engine_state.values["fullname"], SlotFillResult)
    assert engine_state.values["shoesize"] == 9.5


def test_save_overwrites_previous_state(repository):
    repository.save(in_progress_state())
    repository.save(ConversationState(conversation_id="c1"))

    assert repository.load("c1").stack == []


def test_delete(repository):
    repository.save(in_progress_state())

    assert repository.delete("c1") is True
    assert repository.delete("c1") is False
    assert repository.load("c1").stack == []


def test_in_memory_store_keeps_only_serialized_data():
    repository = InMemoryConversationStateRepository()
    state = in_progress_state()
    repository.save(state)

    state.stack.clear()

    assert len(repository.load("c1").stack) == 2
    assert repository.raw("c1")["stack"][0] == {"dialog_id": "root", "state": {"stage": 0}}


def test_sql_errors_become_persistence_errors():
    # No init_db: the table does not exist
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    repository = SqlConversationStateRepository(engine)

    with pytest.raises(PersistenceError):
        repository.load("c1")
    with pytest.raises(PersistenceError):
        repository.save(in_progress_state())


def test_corrupt_in_memory_state_becomes_persistence_error():
    repository = InMemoryConversationStateRepository()
    repository._store["c1"] = '{"conversation_id": "c1", "stack": [{"dialog_id": 7}]}'

    with pytest.raises(PersistenceError):
        repository.load("c1")
