"""
Service Layer Exceptions

Custom exceptions raised by the dialog machinery and the conversation
state store. Recognition failures are never raised: prompts retry locally.
"""


class StructuralConfigurationError(Exception):
    """The dialog set or a slot set is malformed. Fatal for the current flow."""
    pass


class EmptySlotSetError(StructuralConfigurationError):
    """Raised when a slot-filling dialog is declared without any slot."""
    pass


class DuplicateSlotError(StructuralConfigurationError):
    """Raised when two slots of the same slot set share a name."""
    pass


class UnknownDialogError(StructuralConfigurationError):
    """Raised when a dialog id (e.g. a slot's filler) is not registered."""

    def __init__(self, dialog_id: str):
        super().__init__(f"Dialog '{dialog_id}' is not registered in the dialog set.")
        self.dialog_id = dialog_id


class PersistenceError(Exception):
    """
    The conversation state store could not load or save a conversation.
    The turn is not durably completed and may be re-delivered.
    """
    pass
