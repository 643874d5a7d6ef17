"""
Access log in the shape of morgan's ``dev`` format::

    GET /health 200 1.23 ms - 112

The trailing field is the response Content-Length, or ``-`` when the
response has none (streamed bodies, failed requests).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("devops_demo.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, "-", start)
            raise
        length = response.headers.get("content-length", "-")
        self._log(request, response.status_code, length, start)
        return response

    @staticmethod
    def _log(request: Request, status_code: int, length: str, start: float) -> None:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %d %.2f ms - %s",
            request.method,
            request.url.path,
            status_code,
            elapsed_ms,
            length,
        )
