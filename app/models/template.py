"""Inspection template models.

A template is the skeleton of a report: an ordered list of sections, each
holding ordered subsections, each holding ordered checklist items. Sections
and subsections are soft-deleted by stamping ``deleted_at``; rows are never
removed, so completion logic must filter on ``deleted_at is None``.

Only checklists of type ``"status"`` take part in completion. A status
checklist counts as done when ``default_checked`` is True.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.inspection import InspectionTemplateLink

CHECKLIST_TYPE_STATUS = "status"
CHECKLIST_TYPE_INFORMATION = "information"
CHECKLIST_TYPE_DEFECTS = "defects"


class InspectionTemplate(SQLModel, table=True):
    """A report template attached to one or more inspections.

    Attributes:
        id: Unique identifier (UUID).
        name: Template name shown in the report editor.
        order_index: Display position among the company's templates.
        report_description: Optional introductory text for the report.
        created_at: When the template was created.
        deleted_at: Soft-delete timestamp, None while live.
        sections: Sections of the template, in display order.
        inspection_links: Inspections this template is attached to.
    """
    __tablename__ = "inspection_template"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str
    order_index: int = Field(default=0, index=True)
    report_description: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    deleted_at: datetime | None = None

    # Relationships
    sections: list["TemplateSection"] = Relationship(
        back_populates="template",
        sa_relationship_kwargs={"order_by": "TemplateSection.order_index"},
    )
    inspection_links: list["InspectionTemplateLink"] = Relationship(
        back_populates="template"
    )


class TemplateSection(SQLModel, table=True):
    """A report chapter.

    Attributes:
        id: Unique identifier (UUID).
        template_id: Foreign key to the owning InspectionTemplate.
        name: Chapter title.
        order_index: Display position within the template.
        deleted_at: Soft-delete timestamp, None while live.
        subsections: Subsections of the chapter, in display order.
    """
    __tablename__ = "template_section"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    template_id: UUID = Field(foreign_key="inspection_template.id", index=True)
    name: str
    order_index: int = 0
    deleted_at: datetime | None = None

    # Relationships
    template: Optional[InspectionTemplate] = Relationship(back_populates="sections")
    subsections: list["TemplateSubsection"] = Relationship(
        back_populates="section",
        sa_relationship_kwargs={"order_by": "TemplateSubsection.order_index"},
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class TemplateSubsection(SQLModel, table=True):
    """A report sub-chapter holding checklist items.

    Attributes:
        id: Unique identifier (UUID).
        section_id: Foreign key to the owning TemplateSection.
        name: Sub-chapter title.
        order_index: Display position within the section.
        informational_only: Subsection carries no findings, only information.
        deleted_at: Soft-delete timestamp, None while live.
        checklists: Checklist items, in display order.
    """
    __tablename__ = "template_subsection"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    section_id: UUID = Field(foreign_key="template_section.id", index=True)
    name: str
    order_index: int = 0
    informational_only: bool = Field(default=False)
    deleted_at: datetime | None = None

    # Relationships
    section: Optional[TemplateSection] = Relationship(back_populates="subsections")
    checklists: list["TemplateChecklist"] = Relationship(
        back_populates="subsection",
        sa_relationship_kwargs={"order_by": "TemplateChecklist.order_index"},
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class TemplateChecklist(SQLModel, table=True):
    """A single reportable field within a subsection.

    Attributes:
        id: Unique identifier (UUID).
        subsection_id: Foreign key to the owning TemplateSubsection.
        type: One of "status", "information" or "defects". Only status
            checklists gate completion and publishing.
        name: Label of the field.
        field: Input widget for the field (checkbox, text, date, ...).
        default_checked: Whether the inspector has acknowledged the item.
        order_index: Display position within the subsection.
        subsection: Reference to the parent TemplateSubsection object.
    """
    __tablename__ = "template_checklist"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    subsection_id: UUID = Field(foreign_key="template_subsection.id", index=True)
    type: str = Field(default=CHECKLIST_TYPE_STATUS)
    name: str
    field: str | None = None
    default_checked: bool = Field(default=False)
    order_index: int = 0

    # Relationship
    subsection: Optional[TemplateSubsection] = Relationship(back_populates="checklists")

    @property
    def is_status(self) -> bool:
        return self.type == CHECKLIST_TYPE_STATUS
