"""Defect model for findings recorded during an inspection.

A defect is normally filed under a (template, section, subsection) triple.
Defects recorded against the inspection as a whole leave all three
references empty and never affect subsection completion.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.inspection import Inspection


class Defect(SQLModel, table=True):
    """A finding recorded against an inspection.

    Attributes:
        id: Unique identifier (UUID).
        inspection_id: Foreign key to the Inspection.
        template_id: Template the defect is filed under, if any.
        section_id: Section the defect is filed under, if any.
        subsection_id: Subsection the defect is filed under, if any.
        title: Short description of the finding.
        severity: Free-form severity label.
        is_flagged: True while the defect still needs attention. A flagged
            defect keeps its subsection from being complete.
        created_at: When the defect was recorded.
        deleted_at: Soft-delete timestamp, None while live.
        inspection: Reference to the parent Inspection object.
    """
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    inspection_id: UUID = Field(foreign_key="inspection.id", index=True)
    template_id: UUID | None = Field(
        default=None, foreign_key="inspection_template.id", index=True
    )
    section_id: UUID | None = Field(
        default=None, foreign_key="template_section.id", index=True
    )
    subsection_id: UUID | None = Field(
        default=None, foreign_key="template_subsection.id", index=True
    )
    title: str
    severity: str = ""
    is_flagged: bool = Field(default=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    deleted_at: datetime | None = None

    # Relationship
    inspection: Optional["Inspection"] = Relationship(back_populates="defects")
