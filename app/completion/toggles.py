"""Report editor writes that move completion state."""
import logging

from sqlmodel import Session

from app.models import Defect, TemplateChecklist

logger = logging.getLogger(__name__)


def toggle_checklist(session: Session, checklist: TemplateChecklist) -> TemplateChecklist:
    """Flip the checked state of a checklist item."""
    checklist.default_checked = not checklist.default_checked
    session.add(checklist)
    session.commit()
    session.refresh(checklist)

    logger.info(
        f"Checklist '{checklist.name}' ({checklist.id}) "
        f"{'checked' if checklist.default_checked else 'unchecked'}"
    )
    return checklist


def toggle_defect_flag(session: Session, defect: Defect) -> Defect:
    """Flip whether a defect still needs attention."""
    defect.is_flagged = not defect.is_flagged
    session.add(defect)
    session.commit()
    session.refresh(defect)

    logger.info(
        f"Defect '{defect.title}' ({defect.id}) "
        f"{'flagged' if defect.is_flagged else 'unflagged'}"
    )
    return defect
