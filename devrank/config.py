import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Runtime configuration settings"""
    
    # Database settings
    DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///devrank.db')
    
    # Logging settings
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    LOG_DIR = os.getenv('LOG_DIR', 'logs')  # Empty string disables file logging
    
    # Query defaults
    DEFAULT_PAGE_SIZE = int(os.getenv('DEFAULT_PAGE_SIZE', 20))
    DEFAULT_SEARCH_LIMIT = int(os.getenv('DEFAULT_SEARCH_LIMIT', 10))
    
    @classmethod
    def get_async_database_url(cls, database_url: str = None) -> str:
        """Return the database URL with an async driver for SQLite"""
        url = database_url or cls.DATABASE_URL
        if url.startswith('sqlite:///'):
            url = url.replace('sqlite:///', 'sqlite+aiosqlite:///')
        return url
    
    @classmethod
    def validate(cls):
        """Validate that required configuration is present"""
        if not cls.DATABASE_URL:
            raise ValueError("DATABASE_URL is required")
        if cls.DEFAULT_PAGE_SIZE < 0:
            raise ValueError("DEFAULT_PAGE_SIZE must be non-negative")
        if cls.DEFAULT_SEARCH_LIMIT < 0:
            raise ValueError("DEFAULT_SEARCH_LIMIT must be non-negative")
