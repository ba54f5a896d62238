"""Unit tests for listing response parsing."""

import json
from datetime import datetime, timezone

import pytest

from joblist.errors import MalformedResponse
from joblist.models import LocationType, MatchScore
from joblist.schema import parse_job, parse_listing_response

from conftest import make_job


class TestParseListingResponse:
    """Tests for the top-level results/count body."""

    def test_reads_results_and_count(self):
        result = parse_listing_response({"results": [make_job(1), make_job(2)], "count": 47})
        assert [j.id for j in result.items] == ["job-1", "job-2"]
        assert result.total == 47

    def test_missing_count_defaults_to_zero(self):
        result = parse_listing_response({"results": [make_job(1)]})
        assert result.total == 0
        assert len(result.items) == 1

    def test_missing_results_defaults_to_empty(self):
        result = parse_listing_response({"count": 3})
        assert result.items == ()
        assert result.total == 3

    def test_null_fields_default(self):
        result = parse_listing_response({"results": None, "count": None})
        assert result.items == ()
        assert result.total == 0

    @pytest.mark.parametrize("payload", [
        [],
        "oops",
        None,
        {"results": {"id": 1}},
        {"results": "job-1"},
        {"results": [], "count": "many"},
        {"results": [], "count": -1},
        {"results": [], "count": True},
        {"results": [], "count": 47.9},
        {"results": [], "count": float("inf")},
        {"results": [], "count": float("nan")},
        {"results": ["not-an-object"]},
        {"results": [{"title": "No id"}]},
    ])
    def test_malformed_bodies(self, payload):
        with pytest.raises(MalformedResponse):
            parse_listing_response(payload)

    def test_preserves_server_order(self):
        result = parse_listing_response({"results": [make_job(3), make_job(1), make_job(2)], "count": 3})
        assert [j.id for j in result.items] == ["job-3", "job-1", "job-2"]


class TestParseJob:
    """Tests for individual job entries."""

    def test_full_entry(self):
        job = parse_job({
            "id": 42,
            "title": "Backend Engineer",
            "company": {"name": "Acme"},
            "location": "Berlin",
            "location_type": "hybrid",
            "salary_min": "90000.00",
            "salary_max": 120000,
            "posted_date": "2026-10-01T12:00:00Z",
            "description": "Build things.",
            "required_skills": ["Python", "SQL"],
            "source_url": "https://jobs.example.com/42?ref=x",
            "score": {"total_score": 81.5, "skills_score": 90},
        })
        assert job.id == "42"
        assert job.company == "Acme"
        assert job.location_type is LocationType.HYBRID
        assert job.salary_min == 90000.0
        assert job.salary_max == 120000.0
        assert job.posted_date == datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)
        assert job.required_skills == ("Python", "SQL")
        assert job.source_url == "https://jobs.example.com/42?ref=x"
        assert job.score == MatchScore(total_score=81.5)
        assert job.raw["score"]["skills_score"] == 90

    def test_minimal_entry(self):
        job = parse_job({"id": "x"})
        assert job.title == ""
        assert job.company == ""
        assert job.location_type is None
        assert job.salary_min is None and job.salary_max is None
        assert job.posted_date is None
        assert job.description is None
        assert job.required_skills == ()
        assert job.score is None

    def test_company_as_plain_string(self):
        assert parse_job({"id": "x", "company": "Acme"}).company == "Acme"

    def test_unparseable_date_is_dropped(self):
        assert parse_job({"id": "x", "posted_date": "last tuesday"}).posted_date is None

    def test_score_without_numeric_total_is_dropped(self):
        assert parse_job({"id": "x", "score": {"total_score": None}}).score is None
        assert parse_job({"id": "x", "score": 88}).score is None

    @pytest.mark.parametrize("total", ["NaN", '"nan"', '"inf"', '"-Infinity"', "Infinity"])
    def test_non_finite_score_is_dropped(self, total):
        """NaN and infinite scores are discarded rather than kept as badges."""
        body = json.loads('{"results": [{"id": "a", "score": {"total_score": %s}}], "count": 1}' % total)
        assert parse_listing_response(body).items[0].score is None

    def test_non_finite_salary_is_dropped(self):
        job = parse_job({"id": "x", "salary_min": float("nan"), "salary_max": "inf"})
        assert job.salary_min is None
        assert job.salary_max is None

    def test_integral_float_count_is_accepted(self):
        assert parse_listing_response({"results": [], "count": 47.0}).total == 47
