"""Database configuration and session management for SQLite.

Templates, inspections and defects live in a single SQLite database. The
template tree (section, subsection, checklist) is stored one table per level
and reassembled through relationships when a template is read.

SQLite Configuration Choices:
    - **WAL (Write-Ahead Logging)**: Completion reads happen while the report
      editor toggles checklists, so readers must not block on writers.

    - **Foreign Keys**: Disabled by default in SQLite. Enabled so that a
      checklist cannot point at a missing subsection and an inspection link
      cannot point at a missing template.

    - **check_same_thread=False**: FastAPI runs sync dependencies in a
      threadpool, so a session may be used from a different thread than the
      one that opened its connection.
"""

from sqlalchemy import event as sa_event
from sqlmodel import Session, SQLModel, create_engine

from app.core.config import settings

connect_args = {"check_same_thread": False}

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    echo=settings.debug,  # Log SQL statements when DEBUG=true
)


@sa_event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Configure SQLite pragmas on each new connection.

    These settings are connection-level, not database-level, so they must
    be set each time a new connection is established from the pool.
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_and_tables():
    """Create all database tables."""
    # Import models so every table is registered on the metadata
    import app.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session():
    """Dependency for getting database session."""
    with Session(engine) as session:
        yield session
