"""Search data models."""

from dataclasses import dataclass
from typing import Optional

from devrank.constants import SearchConstants


@dataclass(frozen=True)
class SearchResult:
    """Lightweight projection of a matched developer."""
    name: Optional[str]
    slug: str
    type: str = SearchConstants.RESULT_TYPE
