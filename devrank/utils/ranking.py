"""
Shared ranking utilities.

Competition ranking ("RANK" semantics) computed in Python from a snapshot of
(id, score) pairs, so ranking behaves the same on every storage backend.
"""

from typing import Dict, Hashable, Iterable, Optional, Tuple

from devrank.utils.exceptions import InvalidOrderFieldError, InvalidFilterFieldError


class RankingUtility:
    """Shared ranking and listing-validation logic."""
    
    @staticmethod
    def competition_ranks(population: Iterable[Tuple[Hashable, float]]) -> Dict[Hashable, int]:
        """
        Assign 1-based competition ranks to (id, score) pairs, highest score first.
        
        Tied scores share a rank and consume the following rank numbers:
        scores [100, 90, 90, 80] rank as [1, 2, 2, 4].
        """
        ordered = sorted(population, key=lambda entry: entry[1], reverse=True)
        ranks = {}
        current_rank = 0
        previous_score = None
        for position, (entity_id, score) in enumerate(ordered, start=1):
            if position == 1 or score != previous_score:
                current_rank = position
                previous_score = score
            ranks[entity_id] = current_rank
        return ranks
    
    @staticmethod
    def rank_of(population: Iterable[Tuple[Hashable, float]], target_id: Hashable) -> Optional[int]:
        """Rank of one entity within the population, or None when it is absent."""
        return RankingUtility.competition_ranks(population).get(target_id)
    
    @staticmethod
    def validate_order_field(model, field: str):
        """Raise unless field is sortable for the given listable model."""
        if field not in model.SORTABLE_FIELDS:
            raise InvalidOrderFieldError(field, model.SORTABLE_FIELDS)
    
    @staticmethod
    def validate_filter_field(model, field: str):
        """Raise unless field is filterable for the given listable model."""
        if field not in model.FILTERABLE_FIELDS:
            raise InvalidFilterFieldError(field, model.FILTERABLE_FIELDS)
