"""
Engine - Slot-Filling Orchestration Layer

The SlotFillingDialog is the deterministic state machine that walks an
ordered SlotSet and delegates each slot to its filler: a Prompt for scalar
slots, or another SlotFillingDialog for composite slots.
-----------------------------------------------

The engine never waits on its own. It pushes the filler's frame on the
dialog stack and lets the filler suspend the turn. When the filler ends,
the dialog context pops it and calls `resume_child` with the value:

1. The value is stored under the active slot's name (nested engines hand
   back a SlotFillResult, prompts a scalar).
2. The cursor (`next_index`) advances and the next filler is begun.
3. When the selector finds no slot left, the engine ends and returns the
   aggregated SlotFillResult to whoever began it.

Invalid answers never reach the engine: the prompt on top of the stack
retries on its own, so the cursor and the stored values stay untouched.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..domain.models import SlotDetails, SlotSet
from ..services.exceptions import StructuralConfigurationError
from ..state.models import DialogFrame, SlotFillResult, SlotFillState
from .dialog_context import Dialog, DialogContext
from .schemas.state_machine import DialogTurnResult, DialogTurnStatus

logger = logging.getLogger(__name__)


class SlotSelector(ABC):
    """
    Chooses the next slot to fill. Must return an index >= state.next_index,
    or None when the slot set is done.
    """

    @abstractmethod
    def select(self, slots: SlotSet, state: SlotFillState) -> Optional[int]:
        pass


class SequentialSlotSelector(SlotSelector):
    """Declaration order, every slot."""

    def select(self, slots: SlotSet, state: SlotFillState) -> Optional[int]:
        if state.next_index < len(slots):
            return state.next_index
        return None


class BranchingSlotSelector(SlotSelector):
    """
    Declaration order, but a slot listed in `conditions` is only visited when
    an earlier slot holds one of the expected values; otherwise it is skipped.

    Example: {"repair_kind": ("domain", "Réparation")} asks `repair_kind`
    only when the `domain` slot was answered with "Réparation".
    """

    def __init__(self, conditions: Dict[str, Tuple[str, Any]]):
        self.conditions = conditions

    def select(self, slots: SlotSet, state: SlotFillState) -> Optional[int]:
        for index in range(state.next_index, len(slots)):
            condition = self.conditions.get(slots[index].name)
            if condition is None:
                return index

            depends_on, expected = condition
            if not isinstance(expected, (list, tuple, set, frozenset)):
                expected = (expected,)
            if depends_on in state.values and state.values[depends_on] in expected:
                return index

            logger.debug(f"Skipping slot '{slots[index].name}' ({depends_on} not in {expected})")
        return None


class SlotFillingDialog(Dialog):
    def __init__(
        self,
        dialog_id: str,
        slots: Union[SlotSet, Iterable[SlotDetails]],
        selector: Optional[SlotSelector] = None,
    ):
        super().__init__(dialog_id)
        self.slots = slots if isinstance(slots, SlotSet) else SlotSet(slots)
        self.selector = selector or SequentialSlotSelector()

    def dependencies(self) -> List[str]:
        return [slot.filler_id for slot in self.slots]

    async def begin(self, dc: DialogContext, options: Optional[Any] = None) -> DialogTurnResult:
        frame = dc.active_frame
        state = SlotFillState()
        logger.info(f"Slot filling '{self.id}' started ({len(self.slots)} slots)")
        return await self._run_next_filler(dc, frame, state)

    async def continue_turn(self, dc: DialogContext) -> DialogTurnResult:
        # Reached only if the engine is on top, i.e. no filler is pending
        if not dc.turn.is_message:
            return DialogTurnResult(status=DialogTurnStatus.WAITING, pending_dialog_id=self.id)

        frame = dc.active_frame
        return await self._run_next_filler(dc, frame, self._load(frame))

    async def resume_child(self, dc: DialogContext, result: Any) -> DialogTurnResult:
        frame = dc.active_frame
        state = self._load(frame)

        slot = self.slots[state.next_index]
        if state.active_slot != slot.name:
            raise StructuralConfigurationError(
                f"Slot filling '{self.id}' resumed for '{state.active_slot}' "
                f"but its cursor points at '{slot.name}'."
            )

        state.values[slot.name] = result
        state.next_index += 1
        state.active_slot = None
        logger.debug(f"Slot '{self.id}.{slot.name}' filled")

        return await self._run_next_filler(dc, frame, state)

    async def cancel(self, dc: DialogContext, frame: DialogFrame) -> None:
        state = self._load(frame)
        logger.info(f"Slot filling '{self.id}' cancelled, discarding {len(state.values)} value(s)")
        frame.state = {}

    # ==========================================================================
    # Helpers
    # ==========================================================================

    async def _run_next_filler(
        self, dc: DialogContext, frame: DialogFrame, state: SlotFillState
    ) -> DialogTurnResult:
        index = self.selector.select(self.slots, state)

        if index is None:
            state.next_index = len(self.slots)
            self._save(frame, state)
            logger.info(f"Slot filling '{self.id}' complete")
            return await dc.end_dialog(SlotFillResult(values=state.values))

        if index < state.next_index or index >= len(self.slots):
            raise StructuralConfigurationError(
                f"Selector chose slot {index} for '{self.id}' (cursor {state.next_index})."
            )

        slot = self.slots[index]
        state.next_index = index
        state.active_slot = slot.name
        # Save before pushing: the filler's frame becomes the active one
        self._save(frame, state)

        return await dc.begin_dialog(slot.filler_id, slot.prompt_options)

    @staticmethod
    def _load(frame: DialogFrame) -> SlotFillState:
        return SlotFillState.model_validate(frame.state)

    @staticmethod
    def _save(frame: DialogFrame, state: SlotFillState) -> None:
        frame.state = state.model_dump(mode="json")
