"""Inspection report routes: completion status, publish readiness and publishing."""
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from app.completion import can_publish, compute_completion_status, publish_inspection
from app.completion.errors import NoTemplatesError, PublishBlockedError
from app.completion.schemas import CompletionStatus, PublishReadiness
from app.completion.toggles import toggle_checklist
from app.core.auth import get_current_user
from app.core.database import get_session
from app.models import TemplateChecklist, User
from app.routes.deps import get_inspection_for_user, parse_id, require_linked_template

router = APIRouter(prefix="/inspections", tags=["inspections"])


@router.get(
    "/{inspection_id}/templates/{template_id}/completion-status",
    response_model=CompletionStatus,
)
async def completion_status(
    inspection_id: str,
    template_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """
    Get completion status for every section and subsection of a template.

    Sections and subsections are keyed by ID. Deleted ones are omitted.
    """
    inspection_uuid = parse_id(inspection_id, "inspection")
    template_uuid = parse_id(template_id, "template")

    inspection = get_inspection_for_user(session, inspection_uuid, user)
    require_linked_template(inspection, template_uuid)

    return compute_completion_status(session, inspection.id, template_uuid)


@router.get(
    "/{inspection_id}/templates/{template_id}/validate-publish",
    response_model=PublishReadiness,
)
async def validate_publish(
    inspection_id: str,
    template_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """
    Check whether the report can be published.

    Returns the publish verdict together with status checklist counts and
    whether the report is already published. Nothing is written.
    """
    inspection_uuid = parse_id(inspection_id, "inspection")
    template_uuid = parse_id(template_id, "template")

    inspection = get_inspection_for_user(session, inspection_uuid, user)
    require_linked_template(inspection, template_uuid)

    return can_publish(session, inspection.id, template_uuid)


@router.post("/{inspection_id}/publish")
async def publish(
    inspection_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """
    Publish the inspection report.

    Every status checklist of every attached template is checked again
    before publishing. Returns 400 naming the first unchecked checklist, or
    if no templates are attached. Publishing an already published report
    succeeds without changes.
    """
    inspection = get_inspection_for_user(
        session, parse_id(inspection_id, "inspection"), user
    )

    try:
        published = publish_inspection(session, inspection)
    except NoTemplatesError:
        raise HTTPException(
            status_code=400, detail="No templates found for this inspection"
        )
    except PublishBlockedError as e:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "Cannot publish: Not all status checklists are completed",
                "details": e.unchecked.model_dump(mode="json", by_alias=True),
            },
        )

    return {
        "message": (
            "Report published successfully"
            if published
            else "Report is already published"
        ),
        "inspectionId": str(inspection.id),
        "isReportPublished": inspection.is_report_published,
    }


@router.post("/{inspection_id}/templates/{template_id}/checklists/{checklist_id}/toggle")
async def toggle_template_checklist(
    inspection_id: str,
    template_id: str,
    checklist_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """
    Toggle a checklist item's checked state.

    Returns the new state together with the refreshed status of the
    subsection holding the checklist, so the editor can update its badges.
    """
    inspection_uuid = parse_id(inspection_id, "inspection")
    template_uuid = parse_id(template_id, "template")
    checklist_uuid = parse_id(checklist_id, "checklist")

    inspection = get_inspection_for_user(session, inspection_uuid, user)
    require_linked_template(inspection, template_uuid)

    checklist = session.get(TemplateChecklist, checklist_uuid)
    if (
        not checklist
        or checklist.subsection.is_deleted
        or checklist.subsection.section.is_deleted
        or checklist.subsection.section.template_id != template_uuid
    ):
        raise HTTPException(status_code=404, detail="Checklist not found")

    toggle_checklist(session, checklist)

    status = compute_completion_status(session, inspection.id, template_uuid)
    subsection = checklist.subsection
    section_status = status.sections.get(str(subsection.section_id))
    subsection_status = (
        section_status.subsections.get(str(subsection.id)) if section_status else None
    )

    return {
        "success": True,
        "checklistId": str(checklist.id),
        "defaultChecked": checklist.default_checked,
        "subsection": (
            subsection_status.model_dump(by_alias=True) if subsection_status else None
        ),
    }
