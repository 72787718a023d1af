"""
Recognizers - Per-Slot Input Parsing

Pluggable components that turn raw user text plus a locale into candidate
values for one slot. Prompts pick the best candidate and validate it.
"""

from slot_filling_bot.recognizers.base import RecognitionCandidate, Recognizer
from slot_filling_bot.recognizers.choice import ChoiceRecognizer
from slot_filling_bot.recognizers.llm import LLMSlotRecognizer
from slot_filling_bot.recognizers.number import NumberRecognizer
from slot_filling_bot.recognizers.text import TextRecognizer

__all__ = [
    "RecognitionCandidate",
    "Recognizer",
    "ChoiceRecognizer",
    "LLMSlotRecognizer",
    "NumberRecognizer",
    "TextRecognizer",
]
