from .base import ListingSourceBase
from .http import HttpListingSource
from .mock import MockListingSource

from joblist.log import get_logger

log = get_logger(__name__)

__all__ = [
    "ListingSourceBase", "HttpListingSource", "MockListingSource",
    "get_source",
]


def get_source(settings: dict) -> ListingSourceBase:
    if settings.get("api_url"):
        log.info("Registered source: listing API at %s", settings["api_url"])
        return HttpListingSource(
            settings["api_url"],
            api_key=settings.get("api_key", ""),
            timeout=settings.get("timeout", 15.0),
        )

    log.info("No JOBLIST_API_URL configured, using MockListingSource")
    return MockListingSource()
