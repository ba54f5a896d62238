"""Remote listing endpoint over HTTP.

Expects ``GET {api_url}/jobs/`` to accept ``search``, ``location_type``,
``page``, ``page_size`` and ``sort`` query parameters and to answer with
``{"results": [...], "count": N}``.
"""
from __future__ import annotations

from typing import Any

import requests

from joblist.config import DEFAULT_TIMEOUT
from joblist.errors import MalformedResponse, TransportError
from joblist.log import get_logger
from joblist.models import QueryDescriptor
from joblist.sources.base import ListingSourceBase

log = get_logger(__name__)


class HttpListingSource(ListingSourceBase):
    def __init__(self, api_url: str, api_key: str = "", timeout: float = DEFAULT_TIMEOUT) -> None:
        self.url = api_url.rstrip("/") + "/jobs/"
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def fetch_page(self, query: QueryDescriptor) -> Any:
        try:
            r = requests.get(
                self.url,
                params=query.to_params(),
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"GET {self.url} failed: {exc}") from exc

        if not r.ok:
            raise TransportError(
                f"GET {self.url} returned HTTP {r.status_code}",
                status_code=r.status_code,
            )

        try:
            return r.json()
        except ValueError as exc:
            log.debug("Non-JSON body from %s: %.200s", self.url, r.text)
            raise MalformedResponse(f"GET {self.url} returned a non-JSON body") from exc
