"""
Custom exceptions for devrank with user-friendly error messages.

Every error is scoped to the single operation that raised it; callers decide
whether to surface, retry or abort.
"""

from typing import Dict, Iterable


class DevRankException(Exception):
    """Base exception for devrank errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class NotFoundError(DevRankException):
    """Raised when a required lookup finds nothing."""
    def __init__(self, entity: str, key: str, value):
        self.entity = entity
        self.key = key
        self.value = value
        super().__init__(
            f"{entity} with {key}={value!r} not found",
            f"{entity} not found."
        )

class ValidationError(DevRankException):
    """Raised when creation attributes violate entity invariants."""
    def __init__(self, fields: Dict[str, str]):
        self.fields = dict(fields)
        details = ", ".join(f"{field}: {reason}" for field, reason in sorted(self.fields.items()))
        super().__init__(
            f"Validation failed ({details})",
            "Some fields are invalid: " + ", ".join(sorted(self.fields))
        )

class InvalidOrderFieldError(DevRankException):
    """Raised when a listing is ordered by a field outside the sortable set."""
    def __init__(self, field: str, allowed: Iterable[str]):
        self.field = field
        self.allowed = tuple(allowed)
        super().__init__(
            f"Cannot order by '{field}', allowed fields: {', '.join(self.allowed)}",
            f"Sorting by '{field}' is not supported."
        )

class InvalidOrderDirectionError(DevRankException):
    """Raised when an order direction is neither ascending nor descending."""
    def __init__(self, direction):
        self.direction = direction
        super().__init__(
            f"Invalid order direction {direction!r}, expected 'asc' or 'desc'",
            "Sort direction must be ascending or descending."
        )

class InvalidFilterFieldError(DevRankException):
    """Raised when a listing is filtered on a field outside the filterable set."""
    def __init__(self, field: str, allowed: Iterable[str]):
        self.field = field
        self.allowed = tuple(allowed)
        super().__init__(
            f"Cannot filter by '{field}', allowed fields: {', '.join(self.allowed)}",
            f"Filtering by '{field}' is not supported."
        )

class InvalidPaginationError(DevRankException):
    """Raised when limit or offset is negative or not an integer."""
    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(
            f"Invalid {name} {value!r}: must be a non-negative integer",
            f"The {name} must be zero or a positive number."
        )

class EntityNotInScopeError(DevRankException):
    """Raised when a rank is requested for a developer outside the chosen population."""
    def __init__(self, developer_id: int, scope):
        self.developer_id = developer_id
        self.scope = scope
        scope_name = getattr(scope, "value", scope)
        super().__init__(
            f"Developer {developer_id} is not part of the '{scope_name}' ranking population",
            "This developer has no rank in the requested scope."
        )
