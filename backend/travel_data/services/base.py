"""Abstract base class for search providers."""

import abc
from typing import Generic, TypeVar

CriteriaT = TypeVar("CriteriaT")
ResultT = TypeVar("ResultT")


class SearchProvider(abc.ABC, Generic[CriteriaT, ResultT]):
    """A source of normalized search results.

    Routers depend only on this contract, so a fixture-backed provider can be
    replaced by a live upstream one without touching the handlers.
    """

    @abc.abstractmethod
    async def search(self, criteria: CriteriaT) -> list[ResultT]:
        """Run one search and return normalized results, upstream order preserved."""
