"""
LLM Slot Recognizer.

Reads one slot value out of a free-form answer ("I live in Springfield,
near the lake" -> "Springfield") using structured output from an
LLMProvider. The recognizer is stateless: the system prompt is rebuilt from
the slot description on every call.
"""

import logging
from typing import List, Optional

from ..execution.prompts import Template, render
from ..llm.interface import LLMProvider
from ..schemas.decisions import SlotExtraction
from .base import RecognitionCandidate, Recognizer

logger = logging.getLogger(__name__)


class LLMSlotRecognizer(Recognizer):
    def __init__(
        self,
        llm_provider: LLMProvider,
        slot_name: str,
        description: str,
        examples: Optional[List[str]] = None,
    ):
        self.llm = llm_provider
        self.slot_name = slot_name
        self.description = description
        self.examples = list(examples or [])

    async def recognize(self, text: str, locale: str) -> List[RecognitionCandidate]:
        if not (text or "").strip():
            return []

        system_prompt = render(
            Template.SLOT_EXTRACTION,
            slot_name=self.slot_name,
            description=self.description,
            locale=locale,
            examples=self.examples,
        )
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": text},
        ]

        try:
            extraction = await self.llm.generate_structured_output(
                messages=messages,
                response_model=SlotExtraction,
            )
        except Exception as e:
            # Degrade to "no parse": the prompt re-asks instead of failing the turn
            logger.error(f"LLM extraction for slot '{self.slot_name}' failed: {e}")
            return []

        if not extraction.found or not extraction.value:
            logger.debug(f"LLM found no '{self.slot_name}' in {text!r}: {extraction.reasoning}")
            return []

        return [
            RecognitionCandidate(
                text=text.strip(),
                resolution=extraction.value.strip(),
                type_name="llm",
            )
        ]
