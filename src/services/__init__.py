"""Services package."""
from src.services.debounce import Debouncer, debounce
from src.services.pagination import PaginationState, page_slice, paginate
from src.services.products_pipeline import ProductsPipeline, filter_products
from src.services.snapshot_importer import (
    SnapshotImportError,
    import_snapshots,
    load_products,
    load_snapshot_file,
    parse_snapshots,
    seed_if_empty,
)
from src.services.sort_comparators import (
    COMPARATORS,
    SortKey,
    compare_by_due_date,
    compare_by_name,
    compare_by_value_applied,
    sort_products,
)

__all__ = [
    "Debouncer",
    "debounce",
    "PaginationState",
    "page_slice",
    "paginate",
    "ProductsPipeline",
    "filter_products",
    "SnapshotImportError",
    "import_snapshots",
    "load_products",
    "load_snapshot_file",
    "parse_snapshots",
    "seed_if_empty",
    "COMPARATORS",
    "SortKey",
    "compare_by_due_date",
    "compare_by_name",
    "compare_by_value_applied",
    "sort_products",
]
