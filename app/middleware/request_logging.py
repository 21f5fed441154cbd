"""
Request logging middleware
Logs every incoming request and how it completed; never short-circuits
"""

import time
from datetime import datetime, timezone

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.errors import original_url
from app.core.logger import logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        url = original_url(request)
        logger.info(
            f"{request.method} {url}",
            metadata={
                "event": "request_received",
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "method": request.method,
                "path": request.url.path,
            }
        )

        started = time.perf_counter()
        response = await call_next(request)

        logger.performance(
            f"{request.method} {request.url.path}",
            (time.perf_counter() - started) * 1000,
            metadata={"event": "request_completed", "status_code": response.status_code},
        )
        return response
