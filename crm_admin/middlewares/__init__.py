"""
Middlewares package
"""

from .logging import LoggingMiddleware
from .error_handling import ErrorHandlingMiddleware

def setup_middlewares(app):
    """Attach request logging and JSON error handlers"""
    LoggingMiddleware(app)
    ErrorHandlingMiddleware(app)


__all__ = ['setup_middlewares', 'LoggingMiddleware', 'ErrorHandlingMiddleware']
