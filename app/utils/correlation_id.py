"""
Correlation ID utilities for request tracing
The ID lives in a context variable so it follows the request across awaits
"""

import uuid
from contextvars import ContextVar
from typing import Optional

correlation_id_context: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get the correlation ID of the current request, if any"""
    return correlation_id_context.get()


def set_correlation_id(correlation_id: Optional[str]) -> None:
    """Set the correlation ID in context"""
    correlation_id_context.set(correlation_id)


def create_correlation_id() -> str:
    """Create a new UUID-based correlation ID"""
    return str(uuid.uuid4())
