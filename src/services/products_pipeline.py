"""Filter -> sort -> paginate pipeline behind the products listing.

The pipeline owns the listing's view state. Every mutating call recomputes
the derived values (candidates, pagination) explicitly, so the page always
reflects the latest search text, sort key and page number.
"""
import logging

from config import PAGE_SIZE
from src.services.pagination import PaginationState, page_slice, paginate
from src.services.sort_comparators import SortKey, sort_products

logger = logging.getLogger(__name__)


def filter_products(products, text: str) -> list:
    """Return products whose name contains *text*, case-insensitively.

    An empty search returns every product. Relative order is preserved.
    """
    if not text:
        return list(products)
    needle = text.lower()
    return [p for p in products if needle in p.name.lower()]


class ProductsPipeline:
    """Candidate set + pagination for one products listing."""

    def __init__(self, source, page_size: int = PAGE_SIZE):
        self._page_size = page_size
        self._source: list = list(source)
        self._search_text = ""
        self._sort_key = SortKey.NONE
        self._candidates: list = list(self._source)
        self._pagination = paginate(len(self._candidates), 1, page_size)

    # --- read-only state ---

    @property
    def source(self) -> list:
        return list(self._source)

    @property
    def candidates(self) -> list:
        return list(self._candidates)

    @property
    def pagination(self) -> PaginationState:
        return self._pagination

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def sort_key(self) -> SortKey:
        return self._sort_key

    # --- operations ---

    def set_source(self, products) -> None:
        """Replace the source collection and rebuild everything from page 1."""
        self._source = list(products)
        self._apply_filter_and_sort()

    def set_search_text(self, text: str | None) -> None:
        self._search_text = text or ""
        self._apply_filter_and_sort()
        logger.debug(
            "Search %r matched %d of %d products",
            self._search_text, len(self._candidates), len(self._source),
        )

    def set_sort_key(self, key) -> None:
        self._sort_key = SortKey.parse(key)
        if self._sort_key is SortKey.NONE:
            return
        self._candidates = sort_products(self._candidates, self._sort_key)
        self._reset_pagination()

    def set_page(self, page: int) -> PaginationState:
        """Move to *page* without re-filtering or re-sorting."""
        self._pagination = paginate(len(self._candidates), page, self._page_size)
        return self._pagination

    def visible_page(self) -> list:
        return page_slice(self._candidates, self._pagination)

    get_visible_page = visible_page

    # --- internals ---

    def _apply_filter_and_sort(self) -> None:
        candidates = filter_products(self._source, self._search_text)
        self._candidates = sort_products(candidates, self._sort_key)
        self._reset_pagination()

    def _reset_pagination(self) -> None:
        self._pagination = paginate(len(self._candidates), 1, self._page_size)
