import asyncio
from abc import ABC, abstractmethod
from typing import Any

from joblist.models import QueryDescriptor


class ListingSourceBase(ABC):
    @abstractmethod
    def fetch_page(self, query: QueryDescriptor) -> Any:
        """Return the decoded JSON body for one page of listings."""

    async def afetch_page(self, query: QueryDescriptor) -> Any:
        return await asyncio.to_thread(self.fetch_page, query)
