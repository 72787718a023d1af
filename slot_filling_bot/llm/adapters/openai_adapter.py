from typing import List, Optional, Type, TypeVar
from openai import AsyncOpenAI
from pydantic import BaseModel

from ..interface import LLMProvider
from ...config import settings

T = TypeVar("T", bound=BaseModel)

class OpenAIAdapter(LLMProvider):
    def __init__(self, api_key: Optional[str], model_name: str = settings.OPENAI_MODEL):
        if not api_key:
            raise ValueError("OPENAI_API_KEY is required to use the OpenAI adapter.")
        self.client = AsyncOpenAI(api_key=api_key)
        self.model_name = model_name

    async def generate_structured_output(
        self,
        messages: List[dict],
        response_model: Type[T],
        temperature: float = settings.LLM_TEMPERATURE
    ) -> T:
        completion = await self.client.chat.completions.parse(
            model=self.model_name,
            messages=messages,
            response_format=response_model,
            temperature=temperature,
        )

        message = completion.choices[0].message
        # A refusal comes back without a parsed payload
        if message.parsed is None:
            raise ValueError(f"Model returned no structured output: {message.refusal}")
        return message.parsed
