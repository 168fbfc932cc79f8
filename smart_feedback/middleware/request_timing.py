
import logging
import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

log = logging.getLogger("smart_feedback.access")

class RequestTimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        dur_ms = int((time.perf_counter() - start) * 1000)
        response.headers["X-Response-Time-ms"] = str(dur_ms)
        log.info(
            "request handled",
            extra={"method": request.method, "path": request.url.path, "status": response.status_code, "duration_ms": dur_ms},
        )
        return response
