"""Query-string boundary between the landing page and the listing page."""
from __future__ import annotations

from typing import Mapping

from joblist.log import get_logger
from joblist.models import FilterState, LocationType

log = get_logger(__name__)


def _first(value: str | list[str] | None) -> str:
    if isinstance(value, list):
        return value[0] if value else ""
    return value or ""


def filters_from_params(params: Mapping[str, str | list[str]]) -> FilterState:
    """Initial filter state from navigation params.

    Recognised keys are ``search``, ``location_type`` and ``page``; anything
    unusable falls back to the default for that field.
    """
    raw_location = _first(params.get("location_type"))
    location = LocationType.parse(raw_location)
    if raw_location and location is LocationType.ANY and raw_location.lower() not in ("any", "all"):
        log.warning("Unknown location_type %r in navigation params, using 'any'", raw_location)

    page = 1
    raw_page = _first(params.get("page"))
    if raw_page:
        try:
            page = max(1, int(raw_page))
        except ValueError:
            log.warning("Ignoring non-numeric page %r in navigation params", raw_page)

    return FilterState(
        search_text=_first(params.get("search")),
        location_type=location,
        page=page,
    )


def params_from_filters(search_text: str = "", location_type: str | LocationType = LocationType.ANY) -> dict[str, str]:
    params: dict[str, str] = {}
    search = search_text.strip()
    if search:
        params["search"] = search
    location = LocationType.parse(location_type)
    if location is not LocationType.ANY:
        params["location_type"] = location.value
    return params
