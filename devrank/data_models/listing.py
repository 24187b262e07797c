"""
Listing data models for ordered, paginated retrieval.

Provides immutable value objects shared by every listing operation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple, Union

from devrank.constants import PaginationConstants
from devrank.utils.exceptions import InvalidOrderDirectionError, InvalidPaginationError


class OrderDirection(Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class OrderSpec:
    """Order by one field in one direction, tie-broken by id ascending."""
    field: str
    direction: OrderDirection = OrderDirection.ASC
    
    def __post_init__(self):
        if not isinstance(self.direction, OrderDirection):
            try:
                direction = OrderDirection(str(self.direction).lower())
            except ValueError:
                raise InvalidOrderDirectionError(self.direction) from None
            object.__setattr__(self, "direction", direction)
    
    @classmethod
    def from_pair(cls, pair: Tuple[Union[str, OrderDirection], str]) -> "OrderSpec":
        """Build from a (direction, field) pair, e.g. ("desc", "score")."""
        direction, field = pair
        return cls(field=field, direction=direction)
    
    @property
    def descending(self) -> bool:
        return self.direction is OrderDirection.DESC


def _check_non_negative(name: str, value: Any):
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidPaginationError(name, value)


@dataclass(frozen=True)
class PaginationSpec:
    """Limit/offset pair; both must be non-negative integers."""
    limit: int
    offset: int = PaginationConstants.DEFAULT_OFFSET
    
    def __post_init__(self):
        _check_non_negative("limit", self.limit)
        _check_non_negative("offset", self.offset)


@dataclass(frozen=True)
class EqualityFilter:
    """Equality predicate on one foreign-key attribute, applied before ordering."""
    field: str
    value: Any
