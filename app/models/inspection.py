"""Inspection model and its link to report templates.

An inspection is one visit to a property. The report for it is assembled
from one or more templates; the link table records which templates are
attached and in what order. Publishing the report is a one-way transition
recorded in ``is_report_published``.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.company import Company
    from app.models.defect import Defect
    from app.models.template import InspectionTemplate


class InspectionTemplateLink(SQLModel, table=True):
    """Attachment of a template to an inspection.

    Attributes:
        inspection_id: Foreign key to the Inspection.
        template_id: Foreign key to the attached InspectionTemplate.
        order_index: Position of the template within the report.
    """
    __tablename__ = "inspection_template_link"

    inspection_id: UUID = Field(foreign_key="inspection.id", primary_key=True)
    template_id: UUID = Field(foreign_key="inspection_template.id", primary_key=True)
    order_index: int = 0

    # Relationships
    inspection: Optional["Inspection"] = Relationship(back_populates="template_links")
    template: Optional["InspectionTemplate"] = Relationship(
        back_populates="inspection_links"
    )


class Inspection(SQLModel, table=True):
    """A property inspection whose report is being written.

    Attributes:
        id: Unique identifier (UUID).
        company_id: Foreign key to the owning Company.
        address: Inspected property address.
        status: Workflow status label (e.g. "scheduled", "in_progress").
        is_report_published: True once the report has been published to the
            client. Never reset by this service.
        created_at: When the inspection was created.
        template_links: Attached templates, in report order.
        defects: Defects recorded during the inspection.
    """
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    company_id: UUID = Field(foreign_key="company.id", index=True)
    address: str = ""
    status: str = Field(default="scheduled")
    is_report_published: bool = Field(default=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    # Relationships
    company: Optional["Company"] = Relationship(back_populates="inspections")
    template_links: list[InspectionTemplateLink] = Relationship(
        back_populates="inspection",
        sa_relationship_kwargs={"order_by": "InspectionTemplateLink.order_index"},
    )
    defects: list["Defect"] = Relationship(back_populates="inspection")

    @property
    def template_ids(self) -> list[UUID]:
        """IDs of attached templates, in report order."""
        return [link.template_id for link in self.template_links]

    def has_template(self, template_id: UUID) -> bool:
        return template_id in self.template_ids
