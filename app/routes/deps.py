"""Shared lookups and access checks for inspection routes."""
from uuid import UUID

from fastapi import HTTPException
from sqlmodel import Session

from app.models import Inspection, User


def parse_id(value: str, label: str) -> UUID:
    """Parse a path identifier, rejecting malformed values with 400."""
    try:
        return UUID(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {label} ID") from None


def get_inspection_for_user(
    session: Session, inspection_id: UUID, user: User
) -> Inspection:
    """Load an inspection the caller's company owns.

    Raises 404 if it does not exist and 403 if another company owns it.
    """
    inspection = session.get(Inspection, inspection_id)
    if not inspection:
        raise HTTPException(status_code=404, detail="Inspection not found")
    if inspection.company_id != user.company_id:
        raise HTTPException(
            status_code=403, detail="Unauthorized access to this inspection"
        )
    return inspection


def require_linked_template(inspection: Inspection, template_id: UUID) -> None:
    """Raise 404 unless the template is attached to the inspection."""
    if not inspection.has_template(template_id):
        raise HTTPException(
            status_code=404, detail="Template does not belong to this inspection"
        )
