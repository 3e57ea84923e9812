"""Database models package."""
from src.models.database import Base, engine, SessionLocal, get_session, with_db, init_db
from src.models.product import Product

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "get_session",
    "with_db",
    "init_db",
    "Product",
]
