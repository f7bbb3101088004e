"""Response shapes for completion and publish readiness.

These are derived on every request and never stored. Field names are
snake_case in Python and serialized as camelCase, with identifiers as
string keys, to match what the report editor consumes.
"""
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubsectionStatus(_CamelModel):
    is_complete: bool
    total_status_checklists: int
    completed_status_checklists: int


class SectionStatus(_CamelModel):
    is_complete: bool
    subsections: dict[str, SubsectionStatus] = {}


class CompletionStatus(_CamelModel):
    """Completion status tree for one (inspection, template) pair."""

    sections: dict[str, SectionStatus] = {}

    def iter_subsections(self):
        """Yield every subsection status in the tree."""
        for section in self.sections.values():
            yield from section.subsections.values()


class PublishReadiness(_CamelModel):
    can_publish: bool
    total_status_checklists: int
    checked_status_checklists: int
    is_already_published: bool


class UncheckedChecklist(_CamelModel):
    """Location of a status checklist that blocks publishing."""

    template_id: UUID
    template_name: str
    section_name: str
    subsection_name: str
    checklist_name: str
