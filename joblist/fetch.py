"""Request lifecycle for the listing endpoint.

Every call to ``FetchLifecycle.execute`` is tagged with a sequence number
when it is issued. Only the outcome of the most recently issued call may
change state; anything that finishes after a newer call was issued is
dropped without touching results or error.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from joblist.errors import FetchError, TransportError
from joblist.log import get_logger
from joblist.models import QueryDescriptor, ResultSet
from joblist.schema import parse_listing_response
from joblist.sources.base import ListingSourceBase

log = get_logger(__name__)


class FetchState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class FailureRecord:
    kind: str
    message: str
    sequence: int
    query: QueryDescriptor
    at: datetime


class FetchLifecycle:
    def __init__(self, source: ListingSourceBase) -> None:
        self._source = source
        self._issued = 0
        self.state = FetchState.IDLE
        self.results = ResultSet()
        self.error: FetchError | None = None
        self.last_failure: FailureRecord | None = None

    @property
    def latest_sequence(self) -> int:
        return self._issued

    @property
    def loading(self) -> bool:
        return self.state is FetchState.LOADING

    async def execute(self, query: QueryDescriptor) -> bool:
        """Fetch *query*; return True if its outcome was applied.

        Never raises for endpoint failures: they land as ``FetchState.FAILED``
        with the previous results left in place.
        """
        self._issued += 1
        sequence = self._issued
        self.state = FetchState.LOADING
        log.debug("Request #%d issued: %s", sequence, query.to_params())

        outcome: ResultSet | FetchError
        try:
            payload = await self._source.afetch_page(query)
            outcome = parse_listing_response(payload)
        except FetchError as exc:
            outcome = exc
        except Exception as exc:
            outcome = TransportError(f"{exc.__class__.__name__}: {exc}")

        if sequence != self._issued:
            log.debug("Discarding stale response #%d (latest is #%d)", sequence, self._issued)
            return False

        if isinstance(outcome, ResultSet):
            self.results = outcome
            self.error = None
            self.state = FetchState.SUCCEEDED
            log.info(
                "Request #%d loaded %d job(s) of %d (page %d)",
                sequence, len(outcome.items), outcome.total, query.page,
            )
            return True

        self.error = outcome
        self.state = FetchState.FAILED
        self.last_failure = FailureRecord(
            kind=outcome.kind,
            message=outcome.message,
            sequence=sequence,
            query=query,
            at=datetime.now(timezone.utc),
        )
        if outcome.kind == "malformed":
            log.error("Request #%d returned a malformed response: %s", sequence, outcome.message)
        else:
            log.error("Request #%d failed: %s", sequence, outcome.message)
        return True
