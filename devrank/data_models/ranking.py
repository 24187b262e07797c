"""Ranking data models."""

from enum import Enum


class RankScope(Enum):
    """Population a developer is ranked against."""
    GLOBAL = "global"
    SAME_LOCATION = "same_location"
