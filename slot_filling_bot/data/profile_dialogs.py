"""
Hardcoded dialog definitions.

The user-profile flow collects a full name (first, last), a shoe size and a
postal address, then summarizes them. The claim-triage flow asks for a
domain and, depending on it, a sub-domain.

Slot schemas are plain data; `build_dialog_set` turns them into dialogs.
"""

from typing import Optional

from slot_filling_bot.domain.models import SlotDetails
from slot_filling_bot.execution import (
    BranchingSlotSelector,
    ChoicePrompt,
    DialogSet,
    NumberPrompt,
    PresentationDialog,
    SlotFillingDialog,
    TextPrompt,
    shoe_size_validator,
)
from slot_filling_bot.llm.interface import LLMProvider
from slot_filling_bot.recognizers import LLMSlotRecognizer

# ==============================================================================
# USER PROFILE
# ==============================================================================

FULLNAME_SLOTS = [
    SlotDetails.ask("first", "text", "Please enter your first name."),
    SlotDetails.ask("last", "text", "Please enter your last name."),
]

ADDRESS_SLOTS = [
    SlotDetails.ask("street", "street", "Please enter your street address."),
    SlotDetails.ask("city", "city", "Please enter the city."),
    SlotDetails.ask("zip", "text", "Please enter the zip."),
]

PROFILE_SLOTS = [
    SlotDetails("fullname", "fullname"),
    SlotDetails.ask(
        "shoesize",
        "shoesize",
        "Please enter your shoe size.",
        retry_prompt="You must enter a size between 0 and 16. Half sizes are acceptable.",
    ),
    SlotDetails("address", "address"),
]

PROFILE_SUMMARY_TEMPLATES = {
    "fullname": "Your name is {{ first }} {{ last }}.",
    "shoesize": "You wear a size {{ value | summary_value }} shoe.",
    "address": "Your address is: {{ street }}, {{ city }} {{ zip }}",
}

# ==============================================================================
# CLAIM TRIAGE
# ==============================================================================

DOMAINS = ["Assistance", "Déclaration", "Réparation", "Autres"]

TRIAGE_SLOTS = [
    SlotDetails.ask("level1", "choice", "Domaine", choices=DOMAINS),
    SlotDetails.ask(
        "assistance_kind", "choice", "Sous-domaine",
        choices=["Dépannage", "Remorquage", "Rapatriement"],
    ),
    SlotDetails.ask(
        "claim_kind", "choice", "Sous-domaine",
        choices=["Accident", "Vol", "Incendie", "Dégât des eaux"],
    ),
    SlotDetails.ask(
        "repair_kind", "choice", "Sous-domaine",
        choices=["Carrosserie", "Mécanique", "Vitrage"],
    ),
    SlotDetails.ask("details", "text", "Décrivez votre demande."),
]

TRIAGE_BRANCHES = {
    "assistance_kind": ("level1", "Assistance"),
    "claim_kind": ("level1", "Déclaration"),
    "repair_kind": ("level1", "Réparation"),
}


def build_dialog_set(llm_provider: Optional[LLMProvider] = None) -> DialogSet:
    """
    Builds and validates the dialogs of both flows.

    With an LLM provider, street and city are read out of free-form answers
    ("I live at 1 Main St") instead of being taken verbatim.
    """
    street_recognizer = city_recognizer = None
    if llm_provider is not None:
        street_recognizer = LLMSlotRecognizer(
            llm_provider, "street", "Street address: house number and street name.",
            examples=["1 Main St", "221B Baker Street"],
        )
        city_recognizer = LLMSlotRecognizer(
            llm_provider, "city", "Name of a city or town.", examples=["Springfield"],
        )

    dialogs = DialogSet([
        # Scalar fillers
        TextPrompt("text"),
        TextPrompt("street", recognizer=street_recognizer),
        TextPrompt("city", recognizer=city_recognizer),
        NumberPrompt("shoesize", validator=shoe_size_validator),
        ChoicePrompt("choice"),
        # Composite fillers
        SlotFillingDialog("fullname", FULLNAME_SLOTS),
        SlotFillingDialog("address", ADDRESS_SLOTS),
        # Top-level slot sets and the flows presenting them
        SlotFillingDialog("profile", PROFILE_SLOTS),
        PresentationDialog("root", "profile", PROFILE_SUMMARY_TEMPLATES),
        SlotFillingDialog("triage", TRIAGE_SLOTS, selector=BranchingSlotSelector(TRIAGE_BRANCHES)),
        PresentationDialog("triage_root", "triage"),
    ])
    dialogs.validate()
    return dialogs
