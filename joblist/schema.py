"""Response boundary: turn the endpoint's JSON body into a ResultSet.

Missing fields get defaults; fields that are present but unusable in a way
that has no safe default raise ``MalformedResponse``.
"""
from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Mapping

from joblist.errors import MalformedResponse
from joblist.models import Job, LocationType, MatchScore, ResultSet


def _as_number(value: Any) -> float | None:
    """Finite float from a JSON number or numeric string, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _parse_timestamp(value: Any) -> datetime | None:
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        ts = datetime.fromisoformat(text)
    except ValueError:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def _company_name(value: Any) -> str:
    if isinstance(value, Mapping):
        return str(value.get("name") or "")
    if isinstance(value, str):
        return value
    return ""


def _location_type(value: Any) -> LocationType | None:
    if not isinstance(value, str):
        return None
    parsed = LocationType.parse(value)
    return None if parsed is LocationType.ANY else parsed


def _skills(value: Any) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(str(s) for s in value if s)


def _score(value: Any) -> MatchScore | None:
    if not isinstance(value, Mapping):
        return None
    total = _as_number(value.get("total_score"))
    return MatchScore(total_score=total) if total is not None else None


def parse_job(item: Any) -> Job:
    if not isinstance(item, Mapping):
        raise MalformedResponse(f"job entry must be an object, got {type(item).__name__}")
    job_id = item.get("id")
    if job_id is None or job_id == "":
        raise MalformedResponse("job entry has no id")

    return Job(
        id=str(job_id),
        title=str(item.get("title") or ""),
        company=_company_name(item.get("company")),
        location=str(item.get("location") or ""),
        source_url=item.get("source_url") or "",
        location_type=_location_type(item.get("location_type")),
        salary_min=_as_number(item.get("salary_min")),
        salary_max=_as_number(item.get("salary_max")),
        posted_date=_parse_timestamp(item.get("posted_date")),
        description=item.get("description") or None,
        required_skills=_skills(item.get("required_skills")),
        score=_score(item.get("score")),
        raw=dict(item),
    )


def parse_listing_response(payload: Any) -> ResultSet:
    """Validate a ``{"results": [...], "count": N}`` body."""
    if not isinstance(payload, Mapping):
        raise MalformedResponse(f"response must be an object, got {type(payload).__name__}")

    results = payload.get("results")
    if results is None:
        results = []
    if not isinstance(results, list):
        raise MalformedResponse(f"'results' must be a list, got {type(results).__name__}")

    count = payload.get("count")
    if count is None:
        total = 0
    else:
        if isinstance(count, bool):
            raise MalformedResponse("'count' must be an integer, got bool")
        if isinstance(count, float) and not count.is_integer():
            raise MalformedResponse(f"'count' must be an integer, got {count!r}")
        try:
            total = int(count)
        except (TypeError, ValueError, OverflowError):
            raise MalformedResponse(f"'count' must be an integer, got {count!r}") from None
        if total < 0:
            raise MalformedResponse(f"'count' must be non-negative, got {total}")

    return ResultSet(items=tuple(parse_job(item) for item in results), total=total)
