"""Database engine, session factory, and base model."""
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from config import DATABASE_URL

logger = logging.getLogger(__name__)

engine = create_engine(DATABASE_URL, echo=False)
SessionLocal = sessionmaker(bind=engine)


class Base(DeclarativeBase):
    pass


def get_session():
    """Return a new database session."""
    return SessionLocal()


@contextmanager
def with_db():
    """Context manager that yields a DB session and auto-closes it.

    Usage::

        with with_db() as db:
            products = db.query(Product).all()
        # session is closed automatically, even on exception
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def init_db():
    """Create all tables that don't exist yet."""
    import src.models.product  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.debug("Database tables ensured at %s", engine.url)
