"""
Domain Layer - Static Data Models

This module defines the declarative description of what the bot collects:
Slots (SlotDetails), ordered Slot Sets and the options handed to the prompt
that fills a slot. These objects are built once, when the dialog set is
assembled, and never mutated while conversations run.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, overload

from ..services.exceptions import DuplicateSlotError, EmptySlotSetError


@dataclass
class PromptOptions:
    """
    Options passed to a prompt when it is started for a slot.

    Attributes:
        prompt: Question sent when the prompt starts.
        retry_prompt: Sent instead of `prompt` after invalid input.
            Falls back to `prompt` when omitted.
        choices: Allowed answers (ChoicePrompt). Also rendered as
            suggested actions.
    """
    prompt: Optional[str] = None
    retry_prompt: Optional[str] = None
    choices: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class SlotDetails:
    """
    One named unit of information to collect.

    Attributes:
        name: Key of the value in the result tree. Unique within its SlotSet.
        filler_id: Id of the dialog that fills the slot. Either a Prompt or
            another SlotFillingDialog (composite slot).
        prompt_options: Opaque options handed to the filler on begin.
    """
    name: str
    filler_id: str
    prompt_options: Optional[PromptOptions] = None

    @classmethod
    def ask(
        cls,
        name: str,
        filler_id: str,
        prompt: Optional[str] = None,
        retry_prompt: Optional[str] = None,
        choices: Optional[List[str]] = None,
    ) -> "SlotDetails":
        """Shorthand for slots filled by a prompt."""
        return cls(
            name=name,
            filler_id=filler_id,
            prompt_options=PromptOptions(
                prompt=prompt, retry_prompt=retry_prompt, choices=list(choices or [])
            ),
        )


class SlotSet:
    """
    Ordered, immutable sequence of SlotDetails. Declaration order is fill order.

    Raises EmptySlotSetError / DuplicateSlotError on construction so that a
    malformed schema fails when the dialog set is built.
    """

    def __init__(self, slots: Iterable[SlotDetails]):
        self._slots: Tuple[SlotDetails, ...] = tuple(slots)
        if not self._slots:
            raise EmptySlotSetError("A slot set needs at least one slot.")

        seen = set()
        for slot in self._slots:
            if slot.name in seen:
                raise DuplicateSlotError(f"Slot '{slot.name}' is declared twice.")
            seen.add(slot.name)

    @overload
    def __getitem__(self, index: int) -> SlotDetails: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[SlotDetails, ...]: ...

    def __getitem__(self, index):
        return self._slots[index]

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[SlotDetails]:
        return iter(self._slots)

    @property
    def names(self) -> List[str]:
        return [slot.name for slot in self._slots]

    def index_of(self, name: str) -> int:
        for i, slot in enumerate(self._slots):
            if slot.name == name:
                return i
        raise KeyError(name)
