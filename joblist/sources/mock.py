"""In-memory listing source for local runs and tests."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Iterable

from joblist.log import get_logger
from joblist.models import QueryDescriptor
from joblist.sources.base import ListingSourceBase

log = get_logger(__name__)


def _posted(days_ago: float) -> str:
    return (datetime.now(timezone.utc) - timedelta(days=days_ago)).isoformat()


def sample_jobs() -> list[dict[str, Any]]:
    return [
        {
            "id": "mock-1",
            "title": "Senior Backend Engineer",
            "company": {"name": "TechCorp"},
            "location": "Berlin, Germany",
            "location_type": "remote",
            "salary_min": 120000,
            "salary_max": 150000,
            "posted_date": _posted(0.2),
            "description": "Own the listing APIs. Python, PostgreSQL, Kubernetes.",
            "required_skills": ["Python", "PostgreSQL", "Kubernetes", "Django", "Redis", "AWS", "Terraform"],
            "source_url": "https://example.com/job/1",
            "score": {"total_score": 91.2},
        },
        {
            "id": "mock-2",
            "title": "Site Reliability Engineer",
            "company": {"name": "CloudScale SaaS"},
            "location": "Amsterdam, Netherlands",
            "location_type": "hybrid",
            "salary_min": 95000,
            "salary_max": None,
            "posted_date": _posted(2),
            "description": "SRE for distributed systems, on-call rotation.",
            "required_skills": ["Linux", "Prometheus", "Go"],
            "source_url": "https://example.com/job/2",
            "score": {"total_score": 70.4},
        },
        {
            "id": "mock-3",
            "title": "Frontend Engineer",
            "company": {"name": "Pixel Labs"},
            "location": "London, UK",
            "location_type": "onsite",
            "posted_date": _posted(9),
            "description": "React and TypeScript for a design-heavy product.",
            "required_skills": ["React", "TypeScript"],
            "source_url": "https://example.com/job/3",
            "score": {"total_score": 69.6},
        },
        {
            "id": "mock-4",
            "title": "Data Engineer",
            "company": {"name": "Enterprise Platform Inc"},
            "location": "Remote, EU",
            "location_type": "remote",
            "salary_min": 80000,
            "salary_max": 110000,
            "posted_date": _posted(30),
            "description": None,
            "required_skills": ["Spark", "Airflow", "Python"],
            "source_url": "https://example.com/job/4",
        },
    ]


def _matches_text(job: dict[str, Any], needle: str) -> bool:
    company = job.get("company") or {}
    haystack = [
        job.get("title") or "",
        company.get("name", "") if isinstance(company, dict) else str(company),
        job.get("description") or "",
        *(job.get("required_skills") or []),
    ]
    return any(needle in part.lower() for part in haystack)


def _score_key(job: dict[str, Any]) -> tuple[int, float]:
    score = (job.get("score") or {}).get("total_score")
    return (0, -float(score)) if score is not None else (1, 0.0)


class MockListingSource(ListingSourceBase):
    def __init__(self, jobs: Iterable[dict[str, Any]] | None = None) -> None:
        self.jobs = list(jobs) if jobs is not None else sample_jobs()

    def fetch_page(self, query: QueryDescriptor) -> dict[str, Any]:
        hits = self.jobs
        if query.search:
            needle = query.search.lower()
            hits = [j for j in hits if _matches_text(j, needle)]
        if query.location_type is not None:
            hits = [j for j in hits if j.get("location_type") == query.location_type.value]
        if query.sort == "score":
            hits = sorted(hits, key=_score_key)

        start = (query.page - 1) * query.page_size
        page = hits[start:start + query.page_size]
        log.debug("MockListingSource page %d: %d of %d", query.page, len(page), len(hits))
        return {"results": page, "count": len(hits)}
