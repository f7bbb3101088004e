"""Exceptions raised by completion and publish operations."""
from app.completion.schemas import UncheckedChecklist


class CompletionError(Exception):
    """Base class for completion and publish errors."""


class InspectionNotFoundError(CompletionError, LookupError):
    """The inspection does not exist."""


class NoTemplatesError(CompletionError):
    """The inspection has no templates attached, so there is nothing to publish."""


class PublishBlockedError(CompletionError):
    """A status checklist is still unchecked at publish time."""

    def __init__(self, unchecked: UncheckedChecklist):
        self.unchecked = unchecked
        super().__init__(
            f"Status checklist '{unchecked.checklist_name}' in "
            f"{unchecked.section_name} / {unchecked.subsection_name} is not checked"
        )
