"""
Number Recognizer.

Finds numbers in the user's text with Microsoft Recognizers-Text, in the
culture of the message ("8,5" in French, "ten and a half" or "one hundred"
in English). Resolutions are returned as normalized strings ("8.5", "100");
converting them is up to the prompt.
"""

import logging
from typing import List

from recognizers_number import recognize_number
from recognizers_text import Culture

from .base import RecognitionCandidate, Recognizer

logger = logging.getLogger(__name__)

# Languages writing "8,5" for eight and a half
COMMA_DECIMAL_LANGUAGES = {"fr", "de", "es", "it", "pt", "nl"}


def culture_of(locale: str) -> str:
    """Recognizers-Text culture code for a locale such as 'en-US'."""
    return (locale or Culture.English).strip().lower()


def normalize_resolution(value: str, culture: str) -> str:
    """Resolution values follow the culture's decimal mark; always use '.'."""
    if culture.split("-")[0] in COMMA_DECIMAL_LANGUAGES and "." not in value:
        return value.replace(",", ".")
    return value


class NumberRecognizer(Recognizer):
    async def recognize(self, text: str, locale: str) -> List[RecognitionCandidate]:
        if not text or not text.strip():
            return []

        culture = culture_of(locale)
        # Unsupported cultures fall back to English
        results = recognize_number(text, culture, fallback_to_default_culture=True)

        candidates = []
        for result in results:
            value = (result.resolution or {}).get("value")
            if value is None:
                continue
            candidates.append(
                RecognitionCandidate(
                    text=result.text,
                    resolution=normalize_resolution(str(value), culture),
                    type_name="number",
                )
            )

        logger.debug(f"Recognized {len(candidates)} number(s) in {text!r} ({culture})")
        return candidates
