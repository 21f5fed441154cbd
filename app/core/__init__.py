"""
Core module initialization
"""

from .config import config
from .errors import (
    AuthenticationError,
    DatabaseError,
    ErrorResponse,
    ErrorResponseModel,
    NotFoundError,
    ValidationError,
)
from .logger import logger

__all__ = [
    "config",
    "ErrorResponse",
    "ErrorResponseModel",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "DatabaseError",
    "logger",
]
