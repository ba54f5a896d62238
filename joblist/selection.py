"""Tracks the one job (if any) open in the detail view."""
from __future__ import annotations

from joblist.models import Job, ResultSet


class SelectionState:
    def __init__(self) -> None:
        self._selected_id: str | None = None

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    def select(self, job_id: str) -> None:
        self._selected_id = job_id

    def dismiss(self) -> None:
        self._selected_id = None

    def resolve(self, results: ResultSet) -> Job | None:
        """The selected job if it is on the current page, else None."""
        return results.find(self._selected_id)
