"""
Prompt Validators.

Custom acceptance rules run by a prompt after its recognizer succeeded.
A validator receives the PromptValidatorContext and returns True to accept
the recognized value; False makes the prompt ask again.
"""

import math
from typing import Callable

from .slot_prompts import PromptValidatorContext


def is_in_range(value: float, minimum: float, maximum: float, step: float = 1.0) -> bool:
    """
    True when minimum <= value <= maximum and value is a whole multiple of
    `step` (step=0.5 allows integers and exact half-integers).
    """
    if not minimum <= value <= maximum:
        return False
    multiple = value / step
    return math.floor(multiple) == multiple


def range_validator(minimum: float, maximum: float, step: float = 1.0) -> Callable:
    """Builds a validator for NumberPrompt accepting only values `is_in_range`."""

    async def validate(prompt: PromptValidatorContext) -> bool:
        if not prompt.recognized.succeeded:
            return False
        return is_in_range(prompt.recognized.value, minimum, maximum, step)

    return validate


# Shoe sizes range from 0 to 16, whole or half sizes.
shoe_size_validator = range_validator(0, 16, step=0.5)
