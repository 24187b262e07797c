"""
Project-wide constants for devrank.

Fixed values used by the listing, ranking and search layers. Values that
operators may want to tune live in devrank.config instead.
"""

class PaginationConstants:
    """Constants for paginated listings."""
    
    DEFAULT_OFFSET = 0

class SearchConstants:
    """Constants for developer search."""
    
    # Kind tag carried by every developer search result
    RESULT_TYPE = "developer"

class DeveloperConstants:
    """Constants for developer creation."""
    
    REQUIRED_FIELDS = ("username", "score", "total_starred", "followers", "github_created_at")
    
    OPTIONAL_FIELDS = (
        "name", "location_id", "github_id", "avatar_url", "bio", "company", "github_location",
    )
    
    # Counters that may never go negative
    COUNT_FIELDS = ("total_starred", "followers")
