from contextlib import contextmanager

from sqlmodel import SQLModel, Session, create_engine

from .config import DATABASE_URL, SQL_ECHO

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    DATABASE_URL,
    echo=SQL_ECHO,
    pool_pre_ping=True,
    connect_args=connect_args
)


def create_db_and_tables():
    """Create all database tables."""
    # Register every table on the metadata before creating
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def dispose_engine():
    """Close pooled connections on shutdown."""
    engine.dispose()


def get_session():
    """Dependency for getting database sessions."""
    with Session(engine) as session:
        yield session


@contextmanager
def transaction(db: Session):
    """Run a block as one unit of work, rolling back everything on failure."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
