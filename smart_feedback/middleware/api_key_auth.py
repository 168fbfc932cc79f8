# middleware/api_key_auth.py
from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

log = logging.getLogger("smart_feedback.auth")

API_PREFIX = "/api"
HEALTH_PATH = re.compile(r"^/api/[^/]+/health$")
UNAUTHORIZED_BODY = {"error": "Unauthorized: missing or invalid API key"}


def parse_api_keys(csv: str | None) -> frozenset[str]:
    if not csv or not csv.strip():
        return frozenset()
    return frozenset(k.strip() for k in csv.split(",") if k.strip())


def is_gated_path(path: str) -> bool:
    if path != API_PREFIX and not path.startswith(API_PREFIX + "/"):
        return False
    return not HEALTH_PATH.match(path)


def resolve_api_key(request: Request) -> Optional[str]:
    header = request.headers.get("X-API-Key")
    if header and header.strip():
        return header.strip()
    qp = request.query_params.get("api_key")
    return qp.strip() if qp and qp.strip() else None


class ApiKeyAuthMiddleware(BaseHTTPMiddleware):
    """Shared-secret gate for everything under /api except the health checks.

    The key set is fixed when the middleware is built. With no keys
    configured every request passes and a warning is logged.
    """

    def __init__(self, app, keys: Iterable[str] = ()):
        super().__init__(app)
        self.keys = frozenset(keys)
        if not self.keys:
            log.warning("No API keys configured (APP_API_KEYS empty); API access is open")

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not is_gated_path(path):
            return await call_next(request)

        if not self.keys:
            log.warning("No API keys configured, allowing request", extra={"path": path})
            return await call_next(request)

        provided = resolve_api_key(request)
        if provided is None or provided not in self.keys:
            return JSONResponse(status_code=401, content=UNAUTHORIZED_BODY)
        return await call_next(request)
