from abc import ABC, abstractmethod
from typing import List, Type, TypeVar

from pydantic import BaseModel

# Generic type variable for the Pydantic model expected in structured responses.
T = TypeVar("T", bound=BaseModel)

class LLMProvider(ABC):
    """
    Abstract Base Class interface for the LLM backing LLM-driven recognizers
    (OpenAI, Anthropic, a local model, or a fake in tests).
    """

    @abstractmethod
    async def generate_structured_output(
        self,
        messages: List[dict],
        response_model: Type[T],
        temperature: float = 0.0
    ) -> T:
        """
        Generates a response strictly matching the Pydantic 'response_model'.
        Raises on transport errors or when the model refuses to answer.
        """
        pass
