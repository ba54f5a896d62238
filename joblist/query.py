"""Map filter state to the request descriptor sent to the listing endpoint."""
from __future__ import annotations

from joblist.models import FilterState, LocationType, QueryDescriptor

PAGE_SIZE = 20
SORT_KEY = "score"


def build_query(filters: FilterState) -> QueryDescriptor:
    """Build a fresh descriptor from *filters*.

    Blank search text and ``LocationType.ANY`` are left out entirely so the
    endpoint applies no filter for them.
    """
    search = filters.search_text.strip()
    location = filters.location_type
    return QueryDescriptor(
        page=filters.page,
        page_size=PAGE_SIZE,
        sort=SORT_KEY,
        search=search or None,
        location_type=None if location is LocationType.ANY else location,
    )


def default_query() -> QueryDescriptor:
    """The unfiltered recommended listing shown on the landing page."""
    return build_query(FilterState())
