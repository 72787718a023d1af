from typing import List

from .base import RecognitionCandidate, Recognizer


class TextRecognizer(Recognizer):
    """Accepts any non-blank answer as-is (trimmed)."""

    async def recognize(self, text: str, locale: str) -> List[RecognitionCandidate]:
        value = (text or "").strip()
        if not value:
            return []
        return [RecognitionCandidate(text=value, resolution=value, type_name="text")]
