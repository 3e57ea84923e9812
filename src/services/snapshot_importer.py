"""Import fixed income position snapshots into the products table."""
import json
import logging
from pathlib import Path

from src.models.database import get_session, with_db
from src.models.product import Product
from src.services.sort_comparators import parse_due_date

logger = logging.getLogger(__name__)


class SnapshotImportError(ValueError):
    """Raised when a snapshot file or row is malformed."""


def _extract(raw: dict) -> tuple:
    """Pull (name, due_date, value_applied) from a nested or flat snapshot."""
    if "fixedIncome" in raw or "due" in raw or "position" in raw:
        name = (raw.get("fixedIncome") or {}).get("name")
        due_date = (raw.get("due") or {}).get("date")
        value = (raw.get("position") or {}).get("valueApplied")
    else:
        name = raw.get("name")
        due_date = raw.get("due_date")
        value = raw.get("value_applied")
    return name, due_date, value


def parse_snapshots(data) -> list[dict]:
    """Validate snapshot dicts and normalize them to flat product rows.

    Accepts either the nested ``{"fixedIncome": {"name"}, "due": {"date"},
    "position": {"valueApplied"}}`` shape or flat ``{"name", "due_date",
    "value_applied"}`` dicts.

    Returns:
        [{"name": str, "due_date": "dd/MM/yyyy", "value_applied": float}]

    Raises:
        SnapshotImportError: on a missing name, a due date that doesn't match
            dd/MM/yyyy, or a non-numeric applied value.
    """
    if not isinstance(data, list):
        raise SnapshotImportError("Snapshot data must be a list of objects")

    rows = []
    for idx, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise SnapshotImportError(f"Row {idx}: expected an object, got {type(raw).__name__}")
        name, due_date, value = _extract(raw)

        name = (name or "").strip() if isinstance(name, str) else ""
        if not name:
            raise SnapshotImportError(f"Row {idx}: missing product name")
        if not isinstance(due_date, str) or parse_due_date(due_date.strip()) is None:
            raise SnapshotImportError(
                f"Row {idx} ({name}): due date {due_date!r} is not dd/MM/yyyy"
            )
        if isinstance(value, bool):
            raise SnapshotImportError(f"Row {idx} ({name}): applied value must be numeric")
        try:
            value_applied = float(value)
        except (TypeError, ValueError):
            raise SnapshotImportError(
                f"Row {idx} ({name}): applied value {value!r} is not numeric"
            ) from None

        rows.append({
            "name": name,
            "due_date": due_date.strip(),
            "value_applied": value_applied,
        })
    return rows


def load_snapshot_file(path) -> list[dict]:
    """Read and validate a JSON snapshot file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise SnapshotImportError(f"{path.name}: invalid JSON ({exc})") from exc
    return parse_snapshots(data)


def import_snapshots(rows: list[dict]) -> dict:
    """Upsert product rows by name.

    Returns:
        {"imported": int, "updated": int}
    """
    imported = 0
    updated = 0
    session = get_session()
    try:
        for row in rows:
            existing = session.query(Product).filter(Product.name == row["name"]).first()
            if existing:
                existing.due_date = row["due_date"]
                existing.value_applied = row["value_applied"]
                updated += 1
            else:
                session.add(Product(**row))
                imported += 1
        session.commit()
    except Exception:
        session.rollback()
        logger.exception("Snapshot import failed")
        raise
    finally:
        session.close()

    logger.info("Snapshot import: %d imported, %d updated", imported, updated)
    return {"imported": imported, "updated": updated}


def load_products() -> list[Product]:
    """Return every stored product in insertion order."""
    with with_db() as db:
        return db.query(Product).order_by(Product.id).all()


def seed_if_empty(path) -> int:
    """Import the seed file when the products table is empty.

    Returns the number of products imported (0 if already populated or the
    seed file doesn't exist).
    """
    with with_db() as db:
        if db.query(Product).count() > 0:
            return 0
    path = Path(path)
    if not path.exists():
        logger.warning("Seed file not found at %s; starting with no products", path)
        return 0
    result = import_snapshots(load_snapshot_file(path))
    return result["imported"]
