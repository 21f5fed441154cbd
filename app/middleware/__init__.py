"""
Middleware modules for the Product Store
"""

from .api_key import ApiKeyMiddleware
from .correlation_id import CorrelationIdMiddleware
from .error_boundary import ErrorBoundaryMiddleware
from .request_logging import RequestLoggingMiddleware

__all__ = [
    "ApiKeyMiddleware",
    "CorrelationIdMiddleware",
    "ErrorBoundaryMiddleware",
    "RequestLoggingMiddleware",
]
