"""Unit tests for listing endpoint adapters."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from joblist.errors import MalformedResponse, TransportError
from joblist.models import FilterState, LocationType
from joblist.query import build_query
from joblist.sources import HttpListingSource, MockListingSource, get_source

from conftest import make_job


def _response(ok=True, status_code=200, body=None, json_error=None):
    r = MagicMock()
    r.ok = ok
    r.status_code = status_code
    r.text = "<html>"
    if json_error is not None:
        r.json.side_effect = json_error
    else:
        r.json.return_value = body
    return r


class TestHttpListingSource:
    """Tests for HttpListingSource."""

    @patch("joblist.sources.http.requests.get")
    def test_sends_query_params(self, mock_get):
        body = {"results": [make_job(1)], "count": 1}
        mock_get.return_value = _response(body=body)
        source = HttpListingSource("https://api.example.com/", api_key="secret", timeout=5)

        query = build_query(FilterState(search_text="engineer", location_type=LocationType.REMOTE, page=2))
        assert source.fetch_page(query) == body

        args, kwargs = mock_get.call_args
        assert args[0] == "https://api.example.com/jobs/"
        assert kwargs["params"] == {
            "search": "engineer",
            "location_type": "remote",
            "page": 2,
            "page_size": 20,
            "sort": "score",
        }
        assert kwargs["headers"]["Authorization"] == "Bearer secret"
        assert kwargs["timeout"] == 5

    @patch("joblist.sources.http.requests.get")
    def test_no_auth_header_without_key(self, mock_get):
        mock_get.return_value = _response(body={})
        HttpListingSource("https://api.example.com").fetch_page(build_query(FilterState()))
        assert "Authorization" not in mock_get.call_args.kwargs["headers"]

    @patch("joblist.sources.http.requests.get")
    def test_non_success_status(self, mock_get):
        mock_get.return_value = _response(ok=False, status_code=503)
        with pytest.raises(TransportError) as exc_info:
            HttpListingSource("https://api.example.com").fetch_page(build_query(FilterState()))
        assert exc_info.value.status_code == 503

    @patch("joblist.sources.http.requests.get")
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(TransportError):
            HttpListingSource("https://api.example.com").fetch_page(build_query(FilterState()))

    @patch("joblist.sources.http.requests.get")
    def test_non_json_body(self, mock_get):
        mock_get.return_value = _response(json_error=ValueError("Expecting value"))
        with pytest.raises(MalformedResponse):
            HttpListingSource("https://api.example.com").fetch_page(build_query(FilterState()))


class TestMockListingSource:
    """Tests for the in-memory source."""

    def test_text_search_is_case_insensitive(self):
        source = MockListingSource()
        body = source.fetch_page(build_query(FilterState(search_text="REACT")))
        assert [j["id"] for j in body["results"]] == ["mock-3"]
        assert body["count"] == 1

    def test_location_filter(self):
        body = MockListingSource().fetch_page(build_query(FilterState(location_type=LocationType.REMOTE)))
        assert {j["location_type"] for j in body["results"]} == {"remote"}
        assert body["count"] == 2

    def test_pages_and_total(self):
        source = MockListingSource([make_job(i) for i in range(1, 48)])
        body = source.fetch_page(build_query(FilterState(page=3)))
        assert len(body["results"]) == 7
        assert body["count"] == 47

    def test_sorted_by_score_with_unscored_last(self):
        body = MockListingSource().fetch_page(build_query(FilterState()))
        assert [j["id"] for j in body["results"]] == ["mock-1", "mock-2", "mock-3", "mock-4"]


class TestGetSource:
    """Tests for source selection."""

    def test_http_when_url_configured(self):
        source = get_source({"api_url": "https://api.example.com", "api_key": "k", "timeout": 3.0})
        assert isinstance(source, HttpListingSource)
        assert source.timeout == 3.0

    def test_mock_without_url(self):
        assert isinstance(get_source({"api_url": ""}), MockListingSource)
