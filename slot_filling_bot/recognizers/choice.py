"""
Choice Recognizer.

Matches the user's answer against a closed list of choices: by exact value
(case and accent insensitive), by position ("2", "the second one", "deuxième"),
or by the choice appearing inside a longer answer ("I need a réparation please").
Positions are read with Recognizers-Text in the culture of the message.
"""

import logging
import re
from typing import List, Set

from recognizers_number import recognize_number, recognize_ordinal

from .base import RecognitionCandidate, Recognizer, normalize
from .number import culture_of

logger = logging.getLogger(__name__)

EXACT_SCORE = 1.0
PARTIAL_SCORE = 0.8
INDEX_SCORE = 0.7


def positions_in(text: str, locale: str) -> Set[int]:
    """
    1-based positions mentioned in the text. Ordinals win over plain
    numbers, so "the second one" is position 2 only.
    """
    culture = culture_of(locale)
    results = recognize_ordinal(text, culture, fallback_to_default_culture=True)
    if not results:
        results = recognize_number(text, culture, fallback_to_default_culture=True)

    positions = set()
    for result in results:
        value = (result.resolution or {}).get("value")
        try:
            number = float(str(value).replace(",", "."))
        except ValueError:
            # Relative ordinals such as "last" resolve to "end"
            continue
        if number.is_integer():
            positions.add(int(number))
    return positions


class ChoiceRecognizer(Recognizer):
    def __init__(self, choices: List[str]):
        self.choices = list(choices)

    async def recognize(self, text: str, locale: str) -> List[RecognitionCandidate]:
        utterance = normalize(text or "")
        if not utterance:
            return []

        positions = positions_in(text, locale)
        candidates = []
        for index, choice in enumerate(self.choices):
            target = normalize(choice)
            if utterance == target:
                score = EXACT_SCORE
            elif re.search(rf"\b{re.escape(target)}\b", utterance):
                score = PARTIAL_SCORE
            elif index + 1 in positions:
                score = INDEX_SCORE
            else:
                continue
            candidates.append(
                RecognitionCandidate(text=text.strip(), resolution=choice, type_name="choice", score=score)
            )

        # Stable sort keeps declaration order between equal scores
        candidates.sort(key=lambda c: c.score, reverse=True)
        if not candidates:
            logger.debug(f"No choice matched {text!r} among {self.choices}")
        return candidates
