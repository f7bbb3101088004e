"""Company and user models for tenant scoping.

Every inspection belongs to exactly one company. Users belong to a company
too, and may only read or publish inspections owned by their own company.
"""

from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.inspection import Inspection


class Company(SQLModel, table=True):
    """An inspection company (tenant).

    Attributes:
        id: Unique identifier (UUID).
        name: Display name of the company.
        users: Team members who can act on the company's inspections.
        inspections: Inspections owned by this company.
    """
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str

    # Relationships
    users: list["User"] = Relationship(back_populates="company")
    inspections: list["Inspection"] = Relationship(back_populates="company")


class User(SQLModel, table=True):
    """A team member allowed to call the API.

    Attributes:
        id: Unique identifier (UUID).
        email: Login email, unique across the service.
        company_id: Foreign key to the Company the user works for.
        api_token: Opaque bearer token presented in the Authorization header.
        company: Reference to the parent Company object.
    """
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(index=True, unique=True)
    company_id: UUID = Field(foreign_key="company.id")
    api_token: str = Field(index=True, unique=True)

    # Relationship
    company: Optional[Company] = Relationship(back_populates="users")
