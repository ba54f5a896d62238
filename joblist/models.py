"""Data models for job postings, filters and result pages."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class LocationType(str, Enum):
    ANY = "any"
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"

    @classmethod
    def parse(cls, value: str | LocationType | None) -> LocationType:
        """Lenient parse for values coming from navigation or UI widgets.

        Blank, ``"all"`` and unknown values all mean ``ANY``.
        """
        if isinstance(value, LocationType):
            return value
        key = (value or "").strip().lower().replace("-", "")
        if key in ("", "all"):
            return cls.ANY
        for member in cls:
            if member.value == key:
                return member
        return cls.ANY


@dataclass(frozen=True)
class MatchScore:
    total_score: float


@dataclass(frozen=True)
class Job:
    id: str
    title: str
    company: str
    location: str
    source_url: str
    location_type: LocationType | None = None
    salary_min: float | None = None
    salary_max: float | None = None
    posted_date: datetime | None = None
    description: str | None = None
    required_skills: tuple[str, ...] = ()
    score: MatchScore | None = None
    raw: dict = field(default_factory=dict, compare=False, repr=False)


@dataclass
class FilterState:
    search_text: str = ""
    location_type: LocationType = LocationType.ANY
    page: int = 1

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")


@dataclass(frozen=True)
class QueryDescriptor:
    page: int
    page_size: int
    sort: str
    search: str | None = None
    location_type: LocationType | None = None

    def to_params(self) -> dict[str, str | int]:
        """Wire parameters for the listing endpoint; absent filters are omitted."""
        params: dict[str, str | int] = {
            "page": self.page,
            "page_size": self.page_size,
            "sort": self.sort,
        }
        if self.search is not None:
            params["search"] = self.search
        if self.location_type is not None:
            params["location_type"] = self.location_type.value
        return params


@dataclass(frozen=True)
class ResultSet:
    items: tuple[Job, ...] = ()
    total: int = 0

    def find(self, job_id: str | None) -> Job | None:
        if job_id is None:
            return None
        for job in self.items:
            if job.id == job_id:
                return job
        return None
