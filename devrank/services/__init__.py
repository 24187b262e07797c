"""
Services package for devrank.

Query services for listing, ranking and searching developers.
"""

from .base import BaseService
from .listing import ListingEngine
from .ranking import RankCalculator
from .search import SearchMatcher
from .developers import DeveloperService

__all__ = ['BaseService', 'ListingEngine', 'RankCalculator', 'SearchMatcher', 'DeveloperService']
