"""
Rank service for positional ranking of developers by score.

The population is read as (id, score) pairs and ranked in Python with
competition semantics. Ranks reflect whichever score snapshot the read
observed.
"""

import logging

from sqlalchemy import select
from devrank.services.base import BaseService
from devrank.data_models.ranking import RankScope
from devrank.database.models import Developer
from devrank.utils.exceptions import EntityNotInScopeError
from devrank.utils.ranking import RankingUtility

logger = logging.getLogger(__name__)


class RankCalculator(BaseService):
    """Computes a developer's 1-based competition rank within a scope."""
    
    def _population_query(self, developer: Developer, scope: RankScope):
        query = select(Developer.id, Developer.score)
        if scope is RankScope.GLOBAL:
            return query
        if scope is RankScope.SAME_LOCATION:
            return query.where(Developer.location_id == developer.location_id)
        raise ValueError(f"Unsupported rank scope: {scope!r}")
    
    async def rank(self, developer: Developer, scope: RankScope = RankScope.GLOBAL) -> int:
        """
        Get the rank of a developer, 1 being the highest score.
        
        Raises:
            EntityNotInScopeError: If the developer is not part of the scope's
                population (e.g. it has no location for SAME_LOCATION)
        """
        if scope is RankScope.SAME_LOCATION and developer.location_id is None:
            raise EntityNotInScopeError(developer.id, scope)
        
        async with self.get_session() as session:
            result = await session.execute(self._population_query(developer, scope))
            population = [(row.id, row.score) for row in result]
        
        rank = RankingUtility.rank_of(population, developer.id)
        if rank is None:
            logger.warning(f"Developer {developer.id} missing from {scope.value} population of {len(population)}")
            raise EntityNotInScopeError(developer.id, scope)
        return rank
