"""Defect routes for the report editor."""
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from app.completion.toggles import toggle_defect_flag
from app.core.auth import get_current_user
from app.core.database import get_session
from app.models import Defect, User
from app.routes.deps import get_inspection_for_user, parse_id

router = APIRouter(prefix="/inspections/{inspection_id}/defects", tags=["defects"])


@router.post("/{defect_id}/flag")
async def flag_defect(
    inspection_id: str,
    defect_id: str,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """
    Toggle whether a defect still needs attention.

    A flagged defect keeps its subsection, and so its section, incomplete.
    """
    inspection = get_inspection_for_user(
        session, parse_id(inspection_id, "inspection"), user
    )
    defect = session.get(Defect, parse_id(defect_id, "defect"))
    if not defect or defect.inspection_id != inspection.id or defect.deleted_at:
        raise HTTPException(status_code=404, detail="Defect not found")

    toggle_defect_flag(session, defect)

    return {
        "success": True,
        "defectId": str(defect.id),
        "isFlagged": defect.is_flagged,
    }
