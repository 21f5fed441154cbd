"""
API key authentication middleware
Guards every path under the API prefix with a shared-secret header
"""

import hmac

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import config
from app.core.errors import AuthenticationError
from app.core.logger import logger


def is_api_path(path: str, prefix: str) -> bool:
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def is_valid_api_key(provided: str, expected: str) -> bool:
    if not provided:
        return False
    return hmac.compare_digest(provided.encode(), expected.encode())


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """
    Rejects API requests whose key header is missing or wrong.
    Runs before routing, so unknown API paths are rejected too.
    """

    async def dispatch(self, request: Request, call_next):
        if is_api_path(request.url.path, config.api_prefix):
            provided = request.headers.get(config.api_key_header)
            if not is_valid_api_key(provided, config.api_key):
                logger.warning(
                    "Authentication failed: invalid or missing API key",
                    metadata={
                        "event": "auth_failed",
                        "method": request.method,
                        "path": request.url.path,
                        "key_present": provided is not None,
                    }
                )
                raise AuthenticationError("Invalid API key")

        return await call_next(request)
