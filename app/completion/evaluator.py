"""Completion status of an inspection report, per section and subsection.

Rules:
    - Soft-deleted sections and subsections are ignored entirely.
    - A subsection with no status checklists is checklist-complete.
    - Otherwise every status checklist must have ``default_checked`` True.
    - A subsection with a flagged defect is never complete.
    - A section is complete when it has at least one live subsection and
      all of its live subsections are complete.

The tree is recomputed from the database on every call and nothing is
written back.
"""
import logging
from uuid import UUID

from sqlmodel import Session, select

from app.completion.schemas import CompletionStatus, SectionStatus, SubsectionStatus
from app.models import Defect, InspectionTemplate, TemplateSection, TemplateSubsection

logger = logging.getLogger(__name__)


def get_flagged_subsection_ids(
    session: Session, inspection_id: UUID, template_id: UUID
) -> set[UUID]:
    """Return IDs of subsections holding a flagged, live defect.

    Inspection-level defects have no subsection and are left out.
    """
    statement = (
        select(Defect.subsection_id)
        .where(Defect.inspection_id == inspection_id)
        .where(Defect.template_id == template_id)
        .where(Defect.is_flagged == True)  # noqa: E712
        .where(Defect.subsection_id.is_not(None))
        .where(Defect.deleted_at.is_(None))
    )
    return set(session.exec(statement).all())


def _subsection_status(
    subsection: TemplateSubsection, flagged: set[UUID]
) -> SubsectionStatus:
    total = 0
    completed = 0
    for checklist in subsection.checklists:
        if checklist.is_status:
            total += 1
            if checklist.default_checked is True:
                completed += 1

    checklist_complete = total == 0 or completed == total
    return SubsectionStatus(
        is_complete=checklist_complete and subsection.id not in flagged,
        total_status_checklists=total,
        completed_status_checklists=completed,
    )


def _section_status(section: TemplateSection, flagged: set[UUID]) -> SectionStatus:
    subsections = {
        str(subsection.id): _subsection_status(subsection, flagged)
        for subsection in section.subsections
        if not subsection.is_deleted
    }
    # A section without live subsections has nothing to complete and is not done
    is_complete = bool(subsections) and all(
        status.is_complete for status in subsections.values()
    )
    return SectionStatus(is_complete=is_complete, subsections=subsections)


def compute_completion_status(
    session: Session, inspection_id: UUID, template_id: UUID
) -> CompletionStatus:
    """
    Compute the completion status tree of a template within an inspection.

    Returns an empty tree when the template does not exist. Database errors
    are not caught.
    """
    template = session.get(InspectionTemplate, template_id)
    if template is None:
        logger.debug(f"Template {template_id} not found, empty completion status")
        return CompletionStatus(sections={})

    flagged = get_flagged_subsection_ids(session, inspection_id, template_id)

    sections = {
        str(section.id): _section_status(section, flagged)
        for section in template.sections
        if not section.is_deleted
    }
    return CompletionStatus(sections=sections)
