"""Listing controller: owns filters, fetch lifecycle and selection.

All state changes go through the intent methods below. Intents that commit
filters or change the page issue exactly one fetch; draft edits and
selection changes never do. Fetch failures are never raised to the caller,
they show up in ``view_model().error`` instead.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Mapping

from joblist.fetch import FailureRecord, FetchLifecycle, FetchState
from joblist.log import get_logger
from joblist.models import FilterState, Job, LocationType
from joblist.navigation import filters_from_params, params_from_filters
from joblist.pagination import can_go_to, compute
from joblist.query import PAGE_SIZE, build_query, default_query
from joblist.selection import SelectionState
from joblist.sources.base import ListingSourceBase

log = get_logger(__name__)


@dataclass(frozen=True)
class ListingViewModel:
    jobs: tuple[Job, ...]
    total: int
    loading: bool
    error: str | None
    page: int
    total_pages: int
    has_previous: bool
    has_next: bool
    selected_job: Job | None
    search_text: str
    location_type: LocationType
    status: str
    failure: FailureRecord | None = None


class ListingController:
    def __init__(self, source: ListingSourceBase, initial: FilterState | None = None) -> None:
        self._filters = dataclasses.replace(initial) if initial else FilterState()
        self._draft_text = self._filters.search_text
        self._draft_location = self._filters.location_type
        self._fetch = FetchLifecycle(source)
        self._selection = SelectionState()

    @classmethod
    def from_params(
        cls, source: ListingSourceBase, params: Mapping[str, str | list[str]]
    ) -> ListingController:
        return cls(source, filters_from_params(params))

    @property
    def filters(self) -> FilterState:
        """Committed filters (a copy; mutate through intents only)."""
        return dataclasses.replace(self._filters)

    # ── Intents ─────────────────────────────────────────────────────────

    async def start(self) -> None:
        """Mount-time load for the initial filters."""
        await self._load()

    def set_search_text(self, text: str) -> None:
        self._draft_text = text

    def set_location_type(self, value: str | LocationType) -> None:
        self._draft_location = LocationType.parse(value)

    async def apply_location_type(self, value: str | LocationType) -> None:
        """Change the location filter and commit it straight away."""
        self.set_location_type(value)
        await self.search()

    async def search(self) -> None:
        """Commit the draft filters and go back to the first page."""
        self._filters = FilterState(
            search_text=self._draft_text,
            location_type=self._draft_location,
            page=1,
        )
        await self._load()

    async def go_to_page(self, page: int) -> None:
        total_pages = compute(self._fetch.results.total, PAGE_SIZE, self._filters.page).total_pages
        if page == self._filters.page or not can_go_to(page, total_pages):
            log.debug("Ignoring page change to %d (page %d of %d)", page, self._filters.page, total_pages)
            return
        self._filters = dataclasses.replace(self._filters, page=page)
        await self._load()

    async def next_page(self) -> None:
        await self.go_to_page(self._filters.page + 1)

    async def previous_page(self) -> None:
        await self.go_to_page(self._filters.page - 1)

    async def reload(self) -> None:
        await self._load()

    def select(self, job_id: str) -> None:
        self._selection.select(job_id)

    def dismiss(self) -> None:
        self._selection.dismiss()

    # ── View ────────────────────────────────────────────────────────────

    def view_model(self) -> ListingViewModel:
        results = self._fetch.results
        pages = compute(results.total, PAGE_SIZE, self._filters.page)
        error = self._fetch.error
        return ListingViewModel(
            jobs=results.items,
            total=results.total,
            loading=self._fetch.loading,
            error=error.message if error else None,
            page=self._filters.page,
            total_pages=pages.total_pages,
            has_previous=pages.has_previous,
            has_next=pages.has_next,
            selected_job=self._selection.resolve(results),
            search_text=self._draft_text,
            location_type=self._draft_location,
            status=self._status(),
            failure=self._fetch.last_failure,
        )

    def _status(self) -> str:
        state = self._fetch.state
        if state is FetchState.LOADING:
            return "loading"
        if state is FetchState.FAILED:
            return "error"
        if state is FetchState.SUCCEEDED:
            return "success" if self._fetch.results.items else "empty"
        return "idle"

    # ── Internals ───────────────────────────────────────────────────────

    async def _load(self) -> None:
        landed = await self._fetch.execute(build_query(self._filters))
        if not landed or self._fetch.state is not FetchState.SUCCEEDED:
            return

        results = self._fetch.results
        selected = self._selection.selected_id
        if selected is not None and results.find(selected) is None:
            log.debug("Selected job %s left the result set, closing detail", selected)
            self._selection.dismiss()

        clamped = compute(results.total, PAGE_SIZE, self._filters.page).clamped_page
        if clamped != self._filters.page:
            log.info("Page %d is past the last page, reloading page %d", self._filters.page, clamped)
            self._filters = dataclasses.replace(self._filters, page=clamped)
            await self._load()


class HomeController:
    """Recommended listing on the landing page plus the hand-off to search."""

    def __init__(self, source: ListingSourceBase) -> None:
        self._fetch = FetchLifecycle(source)

    async def load(self) -> None:
        await self._fetch.execute(default_query())

    @property
    def jobs(self) -> tuple[Job, ...]:
        return self._fetch.results.items

    @property
    def total(self) -> int:
        return self._fetch.results.total

    @property
    def loading(self) -> bool:
        return self._fetch.loading

    @property
    def error(self) -> str | None:
        return self._fetch.error.message if self._fetch.error else None

    @staticmethod
    def search_params(search_text: str, location_type: str | LocationType = LocationType.ANY) -> dict[str, str]:
        """Navigation params that open the listing page on this search."""
        return params_from_filters(search_text, location_type)
