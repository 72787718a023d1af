"""
Presentation Step - Collect, Then Summarize

A fixed two-stage flow and the top-level caller of a slot-filling engine:

1. Stage 0 begins the slot-filling dialog over the top-level slot set.
2. Stage 1 receives the aggregated SlotFillResult, sends one summary
   activity per top-level slot, and ends the whole flow.

Summary lines come from per-slot Jinja2 templates. A composite slot's
template sees its sub-slots as variables ("{{ first }} {{ last }}"), a scalar
slot's template sees `value`. Slots without a template use the default
"<name>: <value>" line.
"""

import logging
from typing import Any, Dict, List, Optional

from jinja2 import UndefinedError

from ..services.exceptions import StructuralConfigurationError
from ..state.models import SlotFillResult
from .dialog_context import Dialog, DialogContext
from .prompts import Template, render, render_string
from .schemas.state_machine import DialogTurnResult

logger = logging.getLogger(__name__)


class PresentationDialog(Dialog):
    def __init__(
        self,
        dialog_id: str,
        slot_filling_dialog_id: str,
        summary_templates: Optional[Dict[str, str]] = None,
    ):
        super().__init__(dialog_id)
        self.slot_filling_dialog_id = slot_filling_dialog_id
        self.summary_templates = dict(summary_templates or {})

    def dependencies(self) -> List[str]:
        return [self.slot_filling_dialog_id]

    async def begin(self, dc: DialogContext, options: Optional[Any] = None) -> DialogTurnResult:
        dc.active_frame.state = {"stage": 0}
        logger.info(f"Flow '{self.id}' started for conversation {dc.state.conversation_id}")
        return await dc.begin_dialog(self.slot_filling_dialog_id, options)

    async def resume_child(self, dc: DialogContext, result: Any) -> DialogTurnResult:
        dc.active_frame.state = {"stage": 1}
        if not isinstance(result, SlotFillResult):
            result = SlotFillResult.model_validate(result)

        for line in self.summarize(result):
            dc.turn.send_activity(line)

        logger.info(f"Flow '{self.id}' finished for conversation {dc.state.conversation_id}")
        return await dc.end_dialog(result)

    def summarize(self, result: SlotFillResult) -> List[str]:
        """One line per top-level slot, in the order the slots were filled."""
        return [self._summarize_slot(name, value) for name, value in result.values.items()]

    def _summarize_slot(self, name: str, value: Any) -> str:
        plain = value.to_dict() if isinstance(value, SlotFillResult) else value

        source = self.summary_templates.get(name)
        if source is None:
            return render(Template.SLOT_SUMMARY, label=name, value=plain)

        context = dict(plain) if isinstance(plain, dict) else {}
        context.update(name=name, value=plain)
        try:
            return render_string(source, **context)
        except UndefinedError as e:
            raise StructuralConfigurationError(f"Summary template for '{name}' is invalid: {e}") from e
