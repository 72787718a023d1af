"""
Recognizer Interface.

Defines the contract for the per-slot recognizers used by prompts: turn the
raw user text (and the locale it was written in) into candidate values.
"""
import unicodedata
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List


@dataclass
class RecognitionCandidate:
    """
    One parse of the user's text.

    Attributes:
        text: The span of the input that was recognized.
        resolution: The resolved value (e.g. "8.5" for "eight and a half").
        type_name: Kind of entity ("number", "choice", "text", ...).
        score: Confidence from 0.0 to 1.0. Candidates are returned best first.
    """
    text: str
    resolution: Any
    type_name: str = ""
    score: float = 1.0


class Recognizer(ABC):
    @abstractmethod
    async def recognize(self, text: str, locale: str) -> List[RecognitionCandidate]:
        """
        Returns the candidate parses of `text`, best first.
        An empty list means the input could not be parsed.
        """
        pass


def normalize(text: str) -> str:
    """Casefolds and strips accents, so 'Déclaration' matches 'declaration'."""
    decomposed = unicodedata.normalize("NFKD", text.strip().casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))
