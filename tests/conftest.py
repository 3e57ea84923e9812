"""
Pytest fixtures for the fixed income dashboard tests.

The app database is swapped for an in-memory SQLite engine so tests never
touch data/fixed_income.db.
"""
import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite://")
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.models import database
from src.models.product import Product


def make_product(name: str, due_date: str = "01/01/2030", value_applied: float = 0.0) -> Product:
    """Build a transient (unsaved) Product."""
    return Product(name=name, due_date=due_date, value_applied=value_applied)


@pytest.fixture
def products():
    """Seven products in deliberately unsorted order."""
    return [
        make_product("Tesouro Selic 2029", "01/03/2029", 300.0),
        make_product("CDB Banco X", "15/08/2026", 100.0),
        make_product("LCI Caixa", "10/12/2025", 200.0),
        make_product("Tesouro IPCA+ 2035", "15/05/2035", 700.0),
        make_product("LCA Banco do Brasil", "20/02/2027", 50.0),
        make_product("CRI Vale", "30/09/2030", 450.0),
        make_product("Debenture Petrobras", "05/11/2028", 980.0),
    ]


@pytest.fixture
def test_db(monkeypatch):
    """Point the session factory at a fresh in-memory database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    monkeypatch.setattr(database, "engine", engine)
    monkeypatch.setattr(database, "SessionLocal", sessionmaker(bind=engine))
    database.init_db()
    yield engine
    engine.dispose()
