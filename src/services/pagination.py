"""Pagination state for the products listing."""
from dataclasses import dataclass

from config import PAGE_SIZE


@dataclass(frozen=True)
class PaginationState:
    page: int
    size: int
    take: int
    skip: int
    total: int

    @property
    def total_pages(self) -> int:
        return max(1, (self.total + self.size - 1) // self.size)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def paginate(total: int, page: int = 1, size: int = PAGE_SIZE) -> PaginationState:
    """Build a fresh pagination state for *total* items.

    ``skip = size * (page - 1)`` and ``take = min(size, total - skip)``,
    clamped at zero. A page past the end gives an empty slice.
    """
    if size < 1:
        raise ValueError(f"Page size must be positive, got {size}")
    page = max(1, int(page))
    total = max(0, int(total))
    skip = size * (page - 1)
    take = max(0, min(size, total - skip))
    return PaginationState(page=page, size=size, take=take, skip=skip, total=total)


def page_slice(items, state: PaginationState) -> list:
    """Return the items visible on the page described by *state*."""
    return list(items[state.skip:state.skip + state.take])
