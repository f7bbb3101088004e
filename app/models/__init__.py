from app.models.company import Company, User
from app.models.defect import Defect
from app.models.inspection import Inspection, InspectionTemplateLink
from app.models.template import (
    InspectionTemplate,
    TemplateChecklist,
    TemplateSection,
    TemplateSubsection,
)

__all__ = [
    "Company",
    "User",
    "Inspection",
    "InspectionTemplateLink",
    "InspectionTemplate",
    "TemplateSection",
    "TemplateSubsection",
    "TemplateChecklist",
    "Defect",
]
