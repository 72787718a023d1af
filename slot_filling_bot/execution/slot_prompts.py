"""
Prompts - Scalar Slot Fillers

A Prompt asks one question, suspends, and on the next message runs its
Recognizer (and optional validator) over the answer:

1. Success: the prompt ends and hands the recognized value to its caller.
2. Failure: the prompt re-asks (retry_prompt when set) and suspends again.
   There is no retry limit; only a valid answer or a cancellation ends it.

The retry context (options, attempt count) lives in the prompt's frame so
the prompt survives between turns without in-process memory.
"""

import inspect
import logging
import math
from abc import abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, Awaitable, Callable, List, Optional, Union

from ..config import settings
from ..domain.models import PromptOptions
from ..recognizers.base import RecognitionCandidate, Recognizer
from ..recognizers.choice import ChoiceRecognizer
from ..recognizers.number import NumberRecognizer
from ..recognizers.text import TextRecognizer
from ..schemas.activities import InputHints
from ..state.models import PromptState
from .dialog_context import Dialog, DialogContext, TurnContext
from .schemas.state_machine import DialogTurnResult, DialogTurnStatus

logger = logging.getLogger(__name__)


@dataclass
class PromptRecognizerResult:
    succeeded: bool = False
    value: Any = None


@dataclass
class PromptValidatorContext:
    """What a validator gets to decide on."""
    turn: TurnContext
    recognized: PromptRecognizerResult
    options: PromptOptions
    attempt_count: int


PromptValidator = Callable[[PromptValidatorContext], Union[bool, Awaitable[bool]]]


class Prompt(Dialog):
    def __init__(
        self,
        dialog_id: str,
        validator: Optional[PromptValidator] = None,
        recognizer: Optional[Recognizer] = None,
        default_locale: Optional[str] = None,
    ):
        super().__init__(dialog_id)
        self.validator = validator
        self.recognizer = recognizer or self.default_recognizer()
        self.default_locale = default_locale

    @abstractmethod
    def default_recognizer(self) -> Recognizer:
        pass

    async def begin(self, dc: DialogContext, options: Optional[Any] = None) -> DialogTurnResult:
        options = self._coerce_options(options)
        state = PromptState(options=asdict(options), attempt_count=0)
        dc.active_frame.state = state.model_dump(mode="json")

        await self.on_prompt(dc.turn, options, is_retry=False)
        return DialogTurnResult(status=DialogTurnStatus.WAITING, pending_dialog_id=self.id)

    async def continue_turn(self, dc: DialogContext) -> DialogTurnResult:
        # Only messages can answer a prompt
        if not dc.turn.is_message:
            return DialogTurnResult(status=DialogTurnStatus.WAITING, pending_dialog_id=self.id)

        frame = dc.active_frame
        state = PromptState.model_validate(frame.state)
        options = PromptOptions(**state.options)
        state.attempt_count += 1
        frame.state = state.model_dump(mode="json")

        recognized = await self.on_recognize(dc.turn, options)

        if self.validator is not None:
            outcome = self.validator(
                PromptValidatorContext(
                    turn=dc.turn,
                    recognized=recognized,
                    options=options,
                    attempt_count=state.attempt_count,
                )
            )
            is_valid = await outcome if inspect.isawaitable(outcome) else outcome
        else:
            is_valid = recognized.succeeded

        if is_valid and not recognized.succeeded:
            # Nothing to store; an accepted no-parse is asked again
            logger.warning(f"Validator of prompt '{self.id}' accepted unrecognized input, asking again")
            is_valid = False

        if is_valid:
            logger.debug(f"Prompt '{self.id}' accepted {recognized.value!r}")
            return await dc.end_dialog(recognized.value)

        logger.info(f"Prompt '{self.id}' rejected input (attempt {state.attempt_count}), asking again")
        # A validator may have replied itself; then no retry prompt is sent
        if not dc.turn.responded:
            await self.on_prompt(dc.turn, options, is_retry=True)
        return DialogTurnResult(status=DialogTurnStatus.WAITING, pending_dialog_id=self.id)

    async def on_prompt(self, turn: TurnContext, options: PromptOptions, is_retry: bool) -> None:
        text = options.retry_prompt if is_retry and options.retry_prompt else options.prompt
        if text:
            turn.send_activity(
                text,
                input_hint=InputHints.EXPECTING_INPUT,
                suggested_actions=self.suggested_actions(options),
            )

    async def on_recognize(self, turn: TurnContext, options: PromptOptions) -> PromptRecognizerResult:
        candidates = await self.recognizer.recognize(turn.activity.text or "", self.locale_for(turn))
        if not candidates or candidates[0].resolution is None:
            return PromptRecognizerResult(succeeded=False)
        return PromptRecognizerResult(succeeded=True, value=self.resolve(candidates[0]))

    def resolve(self, candidate: RecognitionCandidate) -> Any:
        return candidate.resolution

    def suggested_actions(self, options: PromptOptions) -> List[str]:
        return []

    def locale_for(self, turn: TurnContext) -> str:
        return turn.activity.locale or self.default_locale or settings.DEFAULT_LOCALE

    @staticmethod
    def _coerce_options(options: Optional[Any]) -> PromptOptions:
        if options is None:
            return PromptOptions()
        if isinstance(options, PromptOptions):
            return options
        if isinstance(options, str):
            return PromptOptions(prompt=options)
        return PromptOptions(**options)


class TextPrompt(Prompt):
    def default_recognizer(self) -> Recognizer:
        return TextRecognizer()


class NumberPrompt(Prompt):
    """Resolves to a float."""

    def default_recognizer(self) -> Recognizer:
        return NumberRecognizer()

    def resolve(self, candidate: RecognitionCandidate) -> float:
        try:
            value = float(candidate.resolution)
        except (TypeError, ValueError):
            logger.warning(f"Unparseable number resolution {candidate.resolution!r}, using 0")
            return 0.0
        if math.isnan(value):
            return 0.0
        return value


class ChoicePrompt(Prompt):
    """
    Resolves to the matching choice string. Choices come from the
    PromptOptions of the slot, so one ChoicePrompt can serve many slots.
    """

    def default_recognizer(self) -> Recognizer:
        # Placeholder; the real recognizer depends on the options of each call
        return ChoiceRecognizer([])

    async def on_recognize(self, turn: TurnContext, options: PromptOptions) -> PromptRecognizerResult:
        recognizer = self.recognizer
        if isinstance(recognizer, ChoiceRecognizer):
            recognizer = ChoiceRecognizer(options.choices)

        candidates = await recognizer.recognize(turn.activity.text or "", self.locale_for(turn))
        if not candidates:
            return PromptRecognizerResult(succeeded=False)
        return PromptRecognizerResult(succeeded=True, value=candidates[0].resolution)

    def suggested_actions(self, options: PromptOptions) -> List[str]:
        return list(options.choices)
