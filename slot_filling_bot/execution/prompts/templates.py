"""
Template name constants.

Pure constants - no I/O or file system knowledge.
"""


class Template:
    """Template name constants. Use these instead of raw strings."""

    SLOT_EXTRACTION = "slot_extraction"
    SLOT_SUMMARY = "slot_summary"
