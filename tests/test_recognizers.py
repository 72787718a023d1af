import pytest

from slot_filling_bot.llm.interface import LLMProvider
from slot_filling_bot.recognizers import (
    ChoiceRecognizer,
    LLMSlotRecognizer,
    NumberRecognizer,
    TextRecognizer,
)
from slot_filling_bot.schemas import SlotExtraction


class FakeLLMProvider(LLMProvider):
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def generate_structured_output(self, messages, response_model, temperature=0.0):
        self.calls.append((messages, response_model))
        if self.error:
            raise self.error
        return self.response


async def resolutions(recognizer, text, locale="en-us"):
    return [candidate.resolution for candidate in await recognizer.recognize(text, locale)]


# ==============================================================================
# Numbers
# ==============================================================================

@pytest.mark.asyncio
@pytest.mark.parametrize(
    "text, locale, expected",
    [
        ("10", "en-us", ["10"]),
        ("I wear a 9.5", "en-us", ["9.5"]),
        ("-1", "en-us", ["-1"]),
        ("1,250.5", "en-us", ["1250.5"]),
        ("8,5", "fr-fr", ["8.5"]),
        ("dix", "fr-fr", ["10"]),
        ("ten", "en-us", ["10"]),
        ("twenty-one", "en-us", ["21"]),
        ("eight and a half", "en-us", ["8.5"]),
        ("10 and a half", "en-us", ["10.5"]),
        ("one hundred", "en-us", ["100"]),
        ("two point five", "en-us", ["2.5"]),
        ("ten", "EN-US", ["10"]),
        ("3 or four", "en-us", ["3", "4"]),
        ("no idea", "en-us", []),
        ("", "en-us", []),
    ],
)
async def test_number_recognizer(text, locale, expected):
    assert await resolutions(NumberRecognizer(), text, locale) == expected


# ==============================================================================
# Choices
# ==============================================================================

DOMAINS = ["Assistance", "Déclaration", "Réparation", "Autres"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "text, expected",
    [
        ("Réparation", "Réparation"),
        ("declaration", "Déclaration"),
        ("  AUTRES ", "Autres"),
        ("2", "Déclaration"),
        ("the second one", "Déclaration"),
        ("je veux une réparation svp", "Réparation"),
    ],
)
async def test_choice_recognizer_matches(text, expected):
    assert (await resolutions(ChoiceRecognizer(DOMAINS), text))[0] == expected


@pytest.mark.asyncio
async def test_choice_recognizer_ranks_exact_match_first():
    candidates = await ChoiceRecognizer(["Red", "Dark Red"]).recognize("dark red", "en-us")

    assert [c.resolution for c in candidates] == ["Dark Red", "Red"]
    assert candidates[0].score > candidates[1].score


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "9", "rien"])
async def test_choice_recognizer_no_match(text):
    assert await resolutions(ChoiceRecognizer(DOMAINS), text) == []


# ==============================================================================
# Text
# ==============================================================================

@pytest.mark.asyncio
async def test_text_recognizer_trims_and_rejects_blank():
    assert await resolutions(TextRecognizer(), "  John ") == ["John"]
    assert await resolutions(TextRecognizer(), "   ") == []


# ==============================================================================
# LLM
# ==============================================================================

@pytest.mark.asyncio
async def test_llm_recognizer_extracts_value():
    llm = FakeLLMProvider(SlotExtraction(found=True, value=" Springfield ", reasoning="city named"))
    recognizer = LLMSlotRecognizer(llm, "city", "Name of a city.", examples=["Paris"])

    assert await resolutions(recognizer, "I live in Springfield") == ["Springfield"]

    messages, response_model = llm.calls[0]
    assert response_model is SlotExtraction
    assert "SLOT: city" in messages[0]["content"]
    assert "- Paris" in messages[0]["content"]
    assert messages[1] == {"role": "user", "content": "I live in Springfield"}


@pytest.mark.asyncio
async def test_llm_recognizer_reports_no_parse():
    llm = FakeLLMProvider(SlotExtraction(found=False, value=None, reasoning="off topic"))

    assert await resolutions(LLMSlotRecognizer(llm, "city", "A city."), "hello") == []


@pytest.mark.asyncio
async def test_llm_failure_degrades_to_no_parse():
    llm = FakeLLMProvider(error=RuntimeError("timeout"))

    assert await resolutions(LLMSlotRecognizer(llm, "city", "A city."), "Springfield") == []


@pytest.mark.asyncio
async def test_llm_not_called_for_blank_input():
    llm = FakeLLMProvider()

    assert await resolutions(LLMSlotRecognizer(llm, "city", "A city."), "  ") == []
    assert llm.calls == []


@pytest.mark.asyncio
async def test_choice_positions_follow_the_message_culture():
    assert (await resolutions(ChoiceRecognizer(DOMAINS), "la troisième", "fr-fr"))[0] == "Réparation"


@pytest.mark.asyncio
async def test_choice_named_in_text_outranks_a_position():
    candidates = await ChoiceRecognizer(DOMAINS).recognize("2, réparation", "en-us")

    assert [c.resolution for c in candidates] == ["Réparation", "Déclaration"]
