"""Shared fixtures for listing tests."""
import asyncio
import os

os.environ.setdefault("JOBLIST_LOG_FILE", "0")

import pytest

from joblist.models import QueryDescriptor
from joblist.sources.base import ListingSourceBase


def make_job(n: int, **overrides) -> dict:
    job = {
        "id": f"job-{n}",
        "title": f"Engineer {n}",
        "company": {"name": f"Company {n}"},
        "location": "Remote",
        "location_type": "remote",
        "source_url": f"https://example.com/jobs/{n}",
        "score": {"total_score": 100 - (n % 100)},
    }
    job.update(overrides)
    return job


def make_payload(ids, count=None) -> dict:
    results = [make_job(i) for i in ids]
    return {"results": results, "count": len(results) if count is None else count}


class GatedSource(ListingSourceBase):
    """Source whose responses are released by the test, in any order."""

    def __init__(self):
        self.calls: list[tuple[QueryDescriptor, asyncio.Future]] = []

    def fetch_page(self, query):
        raise NotImplementedError

    async def afetch_page(self, query):
        future = asyncio.get_running_loop().create_future()
        self.calls.append((query, future))
        return await future

    def resolve(self, index: int, payload) -> None:
        self.calls[index][1].set_result(payload)

    def fail(self, index: int, exc: Exception) -> None:
        self.calls[index][1].set_exception(exc)


class StaticSource(ListingSourceBase):
    """Blocking source that answers from a fixed job list, recording queries."""

    def __init__(self, jobs=None, error: Exception | None = None):
        self.jobs = list(jobs or [])
        self.error = error
        self.queries: list[QueryDescriptor] = []

    def fetch_page(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        start = (query.page - 1) * query.page_size
        return {"results": self.jobs[start:start + query.page_size], "count": len(self.jobs)}


@pytest.fixture
def gated_source():
    return GatedSource()


async def settle() -> None:
    """Let freshly created tasks run up to their first await."""
    for _ in range(3):
        await asyncio.sleep(0)
