"""
Utils package initialization.
"""
from .error_handling import handle_database_error, handle_error, validate_query

__all__ = [
    'handle_database_error',
    'handle_error',
    'validate_query'
]
