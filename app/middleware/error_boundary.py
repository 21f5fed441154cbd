"""
Error boundary middleware
Last line of error translation: anything that escapes the routes or the
inner middleware is turned into a JSON error response here
"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.errors import translate_error


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return translate_error(request, exc)
