"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from app.core.database import get_session
from app.main import app
from app.models import (
    Company,
    Defect,
    Inspection,
    InspectionTemplate,
    InspectionTemplateLink,
    TemplateChecklist,
    TemplateSection,
    TemplateSubsection,
    User,
)


@pytest.fixture(name="engine")
def engine_fixture():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Create a new database session for each test."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Create a test client with the test database session."""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="company")
def company_fixture(session: Session) -> Company:
    company = Company(name="Acme Inspections")
    session.add(company)
    session.commit()
    session.refresh(company)
    return company


@pytest.fixture(name="user")
def user_fixture(session: Session, company: Company) -> User:
    user = User(email="inspector@acme.test", company_id=company.id, api_token="acme-token")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="auth_headers")
def auth_headers_fixture(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {user.api_token}"}


@pytest.fixture(name="other_auth_headers")
def other_auth_headers_fixture(session: Session) -> dict[str, str]:
    """Credentials for a user of a different company."""
    other = Company(name="Rival Inspections")
    session.add(other)
    session.flush()
    session.add(User(email="someone@rival.test", company_id=other.id, api_token="rival-token"))
    session.commit()
    return {"Authorization": "Bearer rival-token"}


@pytest.fixture(name="inspection")
def inspection_fixture(session: Session, company: Company) -> Inspection:
    inspection = Inspection(company_id=company.id, address="12 Elm Street")
    session.add(inspection)
    session.commit()
    session.refresh(inspection)
    return inspection


@pytest.fixture(name="make_template")
def make_template_fixture(session: Session):
    """Build a template from a nested description and optionally attach it.

    Sections are dicts with ``name``, ``subsections`` and optional
    ``deleted``. Subsections are dicts with ``name``, ``checklists`` and
    optional ``deleted``. Checklists are ``(type, default_checked)`` tuples.
    """

    def _make(sections, inspection: Inspection | None = None, name="Residential"):
        template = InspectionTemplate(name=name)
        session.add(template)
        session.flush()

        for s_index, section_spec in enumerate(sections):
            section = TemplateSection(
                template_id=template.id,
                name=section_spec["name"],
                order_index=s_index,
                deleted_at=datetime.now(UTC) if section_spec.get("deleted") else None,
            )
            session.add(section)
            session.flush()

            for ss_index, sub_spec in enumerate(section_spec.get("subsections", [])):
                subsection = TemplateSubsection(
                    section_id=section.id,
                    name=sub_spec["name"],
                    order_index=ss_index,
                    deleted_at=datetime.now(UTC) if sub_spec.get("deleted") else None,
                )
                session.add(subsection)
                session.flush()

                for c_index, (kind, checked) in enumerate(sub_spec.get("checklists", [])):
                    session.add(
                        TemplateChecklist(
                            subsection_id=subsection.id,
                            type=kind,
                            name=f"{sub_spec['name']} item {c_index + 1}",
                            default_checked=checked,
                            order_index=c_index,
                        )
                    )

        if inspection is not None:
            session.add(
                InspectionTemplateLink(inspection_id=inspection.id, template_id=template.id)
            )

        session.commit()
        session.refresh(template)
        return template

    return _make


@pytest.fixture(name="add_defect")
def add_defect_fixture(session: Session):
    """Record a defect, filed under a subsection unless ``subsection`` is None."""

    def _add(inspection, template=None, subsection=None, is_flagged=True, deleted=False):
        defect = Defect(
            inspection_id=inspection.id,
            template_id=template.id if template is not None else None,
            section_id=subsection.section_id if subsection is not None else None,
            subsection_id=subsection.id if subsection is not None else None,
            title="Cracked shingle",
            is_flagged=is_flagged,
            deleted_at=datetime.now(UTC) if deleted else None,
        )
        session.add(defect)
        session.commit()
        session.refresh(defect)
        return defect

    return _add


@pytest.fixture(name="complete_template")
def complete_template_fixture(make_template, inspection: Inspection) -> InspectionTemplate:
    """An attached template with one section, one subsection, two checked status items."""
    return make_template(
        [
            {
                "name": "Roof",
                "subsections": [
                    {"name": "Covering", "checklists": [("status", True), ("status", True)]}
                ],
            }
        ],
        inspection=inspection,
    )

