"""
Search service for case-insensitive developer lookup by name or username.
"""

from typing import List

from sqlalchemy import select, or_
from devrank.services.base import BaseService
from devrank.constants import SearchConstants
from devrank.data_models.listing import PaginationSpec
from devrank.data_models.search import SearchResult
from devrank.database.models import Developer


class SearchMatcher(BaseService):
    """Matches developers whose name or username contains a term."""
    
    async def search(self, term: str, limit: int) -> List[SearchResult]:
        """
        Search developers for the given term, best score first.
        
        An empty or whitespace-only term matches every developer. LIKE
        wildcards in the term are matched literally.
        """
        pagination = PaginationSpec(limit=limit)
        if pagination.limit == 0:
            return []
        
        query = select(Developer.name, Developer.username)
        if term and term.strip():
            query = query.where(or_(
                Developer.name.icontains(term, autoescape=True),
                Developer.username.icontains(term, autoescape=True),
            ))
        query = (
            query
            .order_by(Developer.score.desc(), Developer.id.asc())
            .limit(pagination.limit)
        )
        
        async with self.get_session() as session:
            result = await session.execute(query)
            return [
                SearchResult(name=row.name, slug=row.username, type=SearchConstants.RESULT_TYPE)
                for row in result
            ]
