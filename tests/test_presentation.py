import pytest

from slot_filling_bot.data.profile_dialogs import PROFILE_SUMMARY_TEMPLATES
from slot_filling_bot.execution import PresentationDialog
from slot_filling_bot.services.exceptions import StructuralConfigurationError
from slot_filling_bot.state import SlotFillResult

RESULT = SlotFillResult.model_validate({
    "values": {
        "fullname": {"values": {"first": "John", "last": "Smith"}},
        "shoesize": 10.0,
        "address": {"values": {"street": "1 Main St", "city": "Springfield", "zip": "12345"}},
    }
})


def test_templates_render_one_line_per_top_level_slot():
    dialog = PresentationDialog("root", "profile", PROFILE_SUMMARY_TEMPLATES)

    assert dialog.summarize(RESULT) == [
        "Your name is John Smith.",
        "You wear a size 10 shoe.",
        "Your address is: 1 Main St, Springfield 12345",
    ]


def test_default_summary_flattens_nested_values():
    dialog = PresentationDialog("root", "profile")

    assert dialog.summarize(RESULT) == [
        "fullname: first John, last Smith",
        "shoesize: 10",
        "address: street 1 Main St, city Springfield, zip 12345",
    ]


def test_half_sizes_are_kept():
    dialog = PresentationDialog("root", "profile", PROFILE_SUMMARY_TEMPLATES)
    result = SlotFillResult(values={"shoesize": 8.5})

    assert dialog.summarize(result) == ["You wear a size 8.5 shoe."]


def test_template_referencing_unknown_sub_slot_is_a_configuration_error():
    dialog = PresentationDialog("root", "profile", {"fullname": "Hello {{ middle }}"})

    with pytest.raises(StructuralConfigurationError):
        dialog.summarize(RESULT)


def test_result_tree_is_a_tagged_union():
    assert isinstance(RESULT["fullname"], SlotFillResult)
    assert isinstance(RESULT["shoesize"], float)
    assert RESULT.to_dict()["address"] == {"street": "1 Main St", "city": "Springfield", "zip": "12345"}
