"""Publish readiness and the publish transition for inspection reports.

``can_publish`` is the read-only gate shown in the report editor. It reuses
the completion tree, so flagged defects hold it closed.

``publish_inspection`` performs the actual transition. Before writing it
walks every template attached to the inspection again and refuses if any
live status checklist is still unchecked. That check looks at checklists
only; flagged defects do not block the write.
"""
import logging
from uuid import UUID

from sqlmodel import Session

from app.completion.errors import (
    InspectionNotFoundError,
    NoTemplatesError,
    PublishBlockedError,
)
from app.completion.evaluator import compute_completion_status
from app.completion.schemas import PublishReadiness, UncheckedChecklist
from app.models import Inspection, InspectionTemplate

logger = logging.getLogger(__name__)


def can_publish(
    session: Session, inspection_id: UUID, template_id: UUID
) -> PublishReadiness:
    """
    Decide whether the report may be published from this template's view.

    An empty completion tree (no template, or no live sections) counts as
    all sections complete.

    Raises:
        InspectionNotFoundError: If the inspection does not exist.
    """
    inspection = session.get(Inspection, inspection_id)
    if inspection is None:
        raise InspectionNotFoundError(f"Inspection {inspection_id} not found")

    is_already_published = inspection.is_report_published is True
    status = compute_completion_status(session, inspection_id, template_id)

    all_sections_complete = all(
        section.is_complete for section in status.sections.values()
    )

    total = 0
    checked = 0
    for subsection in status.iter_subsections():
        total += subsection.total_status_checklists
        checked += subsection.completed_status_checklists

    return PublishReadiness(
        can_publish=not is_already_published and all_sections_complete,
        total_status_checklists=total,
        checked_status_checklists=checked,
        is_already_published=is_already_published,
    )


def find_unchecked_status_checklist(
    session: Session, inspection: Inspection
) -> UncheckedChecklist | None:
    """Return the first unchecked live status checklist across all attached templates."""
    for template_id in inspection.template_ids:
        template = session.get(InspectionTemplate, template_id)
        if template is None:
            continue

        for section in template.sections:
            if section.is_deleted:
                continue
            for subsection in section.subsections:
                if subsection.is_deleted:
                    continue
                for checklist in subsection.checklists:
                    if checklist.is_status and checklist.default_checked is not True:
                        return UncheckedChecklist(
                            template_id=template.id,
                            template_name=template.name,
                            section_name=section.name,
                            subsection_name=subsection.name,
                            checklist_name=checklist.name,
                        )
    return None


def publish_inspection(session: Session, inspection: Inspection) -> bool:
    """
    Publish the inspection report.

    Returns False without writing if the report is already published,
    True once it has been published.

    Raises:
        NoTemplatesError: If no template is attached to the inspection.
        PublishBlockedError: If a status checklist is still unchecked.
    """
    if inspection.is_report_published is True:
        logger.info(f"Inspection {inspection.id} already published")
        return False

    if not inspection.template_ids:
        raise NoTemplatesError(f"No templates found for inspection {inspection.id}")

    unchecked = find_unchecked_status_checklist(session, inspection)
    if unchecked is not None:
        logger.info(
            f"Publish blocked for inspection {inspection.id}: "
            f"'{unchecked.checklist_name}' unchecked in {unchecked.template_name}"
        )
        raise PublishBlockedError(unchecked)

    inspection.is_report_published = True
    session.add(inspection)
    session.commit()
    session.refresh(inspection)

    logger.info(f"Published report for inspection {inspection.id}")
    return True
