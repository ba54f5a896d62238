"""Page-count and navigation availability derived from a server total."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PaginationView:
    total_pages: int
    has_previous: bool
    has_next: bool
    clamped_page: int


def compute(total: int, page_size: int, current_page: int) -> PaginationView:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    total_pages = math.ceil(max(0, total) / page_size)
    # zero pages behaves like a single page for navigation
    upper = max(1, total_pages)
    return PaginationView(
        total_pages=total_pages,
        has_previous=current_page > 1,
        has_next=current_page < total_pages,
        clamped_page=max(1, min(current_page, upper)),
    )


def can_go_to(page: int, total_pages: int) -> bool:
    return 1 <= page <= total_pages
