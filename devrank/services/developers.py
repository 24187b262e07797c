"""
Developer service - the caller-facing surface of devrank.

Composes the developer store with the listing, rank and search services so an
API layer only needs one object. Every method is a self-contained query;
nothing is cached between calls.
"""

from typing import Any, List, Mapping, Optional
import logging

from devrank.config import Config
from devrank.services.listing import ListingEngine
from devrank.services.ranking import RankCalculator
from devrank.services.search import SearchMatcher
from devrank.operations.developer_store import DeveloperStore
from devrank.data_models.listing import OrderSpec, PaginationSpec, EqualityFilter
from devrank.data_models.ranking import RankScope
from devrank.data_models.search import SearchResult
from devrank.database.models import Developer, Repository

logger = logging.getLogger(__name__)


class DeveloperService:
    """Lookups, listings, ranks and search for developers."""

    def __init__(self, database):
        self.database = database
        self.store = DeveloperStore(database)
        self.listing = ListingEngine(database.create_session)
        self.rank_calculator = RankCalculator(database.create_session)
        self.search_matcher = SearchMatcher(database.create_session)

    def _page(self, pagination: Optional[PaginationSpec]) -> PaginationSpec:
        return pagination if pagination is not None else PaginationSpec(limit=Config.DEFAULT_PAGE_SIZE)

    async def get_developer(self, developer_id: int) -> Optional[Developer]:
        return await self.store.get_by_id(developer_id)

    async def get_developer_required(self, developer_id: int) -> Developer:
        return await self.store.get_by_id_required(developer_id)

    async def get_developer_by_username(self, username: str) -> Optional[Developer]:
        return await self.store.get_by_username(username)

    async def get_developer_by_username_required(self, username: str) -> Developer:
        return await self.store.get_by_username_required(username)

    async def create_developer(self, attributes: Mapping[str, Any]) -> Developer:
        return await self.store.create(attributes)

    async def list_developers(self, order: OrderSpec, pagination: Optional[PaginationSpec] = None) -> List[Developer]:
        """Get all developers with limit, offset and order."""
        return await self.listing.list(Developer, order, self._page(pagination))

    async def count_developers(self) -> int:
        return await self.store.count()

    async def list_developers_in_location(
        self,
        location_id: int,
        order: OrderSpec,
        pagination: Optional[PaginationSpec] = None
    ) -> List[Developer]:
        """Get developers of one location with limit, offset and order."""
        return await self.listing.list(
            Developer, order, self._page(pagination), where=EqualityFilter("location_id", location_id)
        )

    async def count_developers_in_location(self, location_id: int) -> int:
        return await self.listing.count(Developer, where=EqualityFilter("location_id", location_id))

    async def list_repositories_of_developer(
        self,
        developer: Developer,
        order: OrderSpec,
        pagination: Optional[PaginationSpec] = None
    ) -> List[Repository]:
        """Get repositories of a developer with limit, offset and order."""
        return await self.listing.list(
            Repository, order, self._page(pagination), where=EqualityFilter("developer_id", developer.id)
        )

    async def count_repositories_of_developer(self, developer: Developer) -> int:
        return await self.store.count_for_developer(developer)

    async def rank_of_developer(self, developer: Developer, scope: RankScope = RankScope.GLOBAL) -> int:
        """Get the position of a developer, globally or within its location."""
        return await self.rank_calculator.rank(developer, scope)

    async def search_developers(self, term: str, limit: Optional[int] = None) -> List[SearchResult]:
        """Search developers by name or username."""
        if limit is None:
            limit = Config.DEFAULT_SEARCH_LIMIT
        results = await self.search_matcher.search(term, limit)
        logger.debug(f"Search for {term!r} returned {len(results)} developers")
        return results
