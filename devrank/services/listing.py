"""
Listing service for ordered, paginated retrieval.

One engine serves every listable entity kind (developers, repositories):
the model's SORTABLE_FIELDS and FILTERABLE_FIELDS define what a caller may
order and filter by.
"""

from typing import List, Optional, Type, TypeVar
import logging

from sqlalchemy import select, func
from devrank.services.base import BaseService
from devrank.data_models.listing import OrderSpec, PaginationSpec, EqualityFilter
from devrank.database.models import Listable
from devrank.utils.ranking import RankingUtility

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Listable)


class ListingEngine(BaseService):
    """Generic ordered/paginated listing over one entity kind."""
    
    def _apply_filter(self, query, model: Type[T], where: Optional[EqualityFilter]):
        if where is None:
            return query
        RankingUtility.validate_filter_field(model, where.field)
        column = model.column_for(where.field)
        if where.value is None:
            return query.where(column.is_(None))
        return query.where(column == where.value)
    
    async def list(
        self,
        model: Type[T],
        order: OrderSpec,
        pagination: PaginationSpec,
        where: Optional[EqualityFilter] = None
    ) -> List[T]:
        """List entities ordered by one field then id ascending, one page at a time."""
        RankingUtility.validate_order_field(model, order.field)
        query = self._apply_filter(select(model), model, where)
        
        if pagination.limit == 0:
            return []
        
        sort_column = model.column_for(order.field)
        query = (
            query
            .order_by(sort_column.desc() if order.descending else sort_column.asc())
            .order_by(model.id.asc())
            .limit(pagination.limit)
            .offset(pagination.offset)
        )
        
        async with self.get_session() as session:
            result = await session.execute(query)
            entities = list(result.scalars().all())
        
        logger.debug(
            f"Listed {len(entities)} {model.__tablename__} "
            f"(order={order.field} {order.direction.value}, limit={pagination.limit}, offset={pagination.offset})"
        )
        return entities
    
    async def count(self, model: Type[T], where: Optional[EqualityFilter] = None) -> int:
        """Count entities, optionally restricted by an equality filter."""
        query = self._apply_filter(select(func.count(model.id)), model, where)
        async with self.get_session() as session:
            return await session.scalar(query) or 0
