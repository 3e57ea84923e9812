"""Sort strategies for the fixed income products listing.

Each comparator takes two products and returns -1, 0 or 1. Products only
need ``name``, ``due_date`` and ``value_applied`` attributes, so both ORM
rows and lightweight test doubles work.
"""
import logging
from datetime import datetime
from enum import Enum
from functools import cmp_to_key
from typing import Callable, Optional

from config import DUE_DATE_FORMAT

logger = logging.getLogger(__name__)

Comparator = Callable[[object, object], int]


class SortKey(str, Enum):
    NONE = "none"
    NAME = "name"
    DUE_DATE = "dueDate"
    VALUE_APPLIED = "valueApplied"

    @classmethod
    def parse(cls, value) -> "SortKey":
        """Map a selector value (or None / "") to a SortKey, defaulting to NONE."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.NONE
        try:
            return cls(value)
        except ValueError:
            logger.warning("Unknown sort key %r, leaving order untouched", value)
            return cls.NONE


def _cmp(a, b) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def parse_due_date(value: str) -> Optional[datetime]:
    """Parse a dd/MM/yyyy date, returning None if it doesn't match."""
    try:
        return datetime.strptime(value, DUE_DATE_FORMAT)
    except (TypeError, ValueError):
        return None


def compare_by_name(a, b) -> int:
    """Ordinal, case-sensitive name comparison."""
    return _cmp(a.name, b.name)


def compare_by_due_date(a, b) -> int:
    """Chronological comparison of dd/MM/yyyy due dates.

    Dates are expected to be validated upstream (see snapshot_importer).
    A date that still fails to parse makes the pair compare equal.
    """
    date_a = parse_due_date(a.due_date)
    date_b = parse_due_date(b.due_date)
    if date_a is None or date_b is None:
        logger.warning(
            "Unparsable due date while sorting (%r vs %r); treating as equal",
            a.due_date, b.due_date,
        )
        return 0
    return _cmp(date_a, date_b)


def compare_by_value_applied(a, b) -> int:
    """Numeric ascending comparison of applied values."""
    return _cmp(a.value_applied, b.value_applied)


COMPARATORS: dict[SortKey, Comparator] = {
    SortKey.NAME: compare_by_name,
    SortKey.DUE_DATE: compare_by_due_date,
    SortKey.VALUE_APPLIED: compare_by_value_applied,
}


def sort_products(products, key) -> list:
    """Return a new list ordered by the comparator for *key*.

    ``sorted`` is stable, so ties keep their relative order and sorting an
    already sorted list is a no-op. ``SortKey.NONE`` keeps the input order.
    """
    comparator = COMPARATORS.get(SortKey.parse(key))
    if comparator is None:
        return list(products)
    return sorted(products, key=cmp_to_key(comparator))
