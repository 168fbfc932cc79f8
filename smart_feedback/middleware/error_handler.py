
import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

log = logging.getLogger("smart_feedback.error_handler")

async def http_error_handler(request: Request, exc: Exception):

    log.exception("Unhandled error", extra={"path": str(request.url.path)})
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error"},
    )

async def validation_error_handler(request: Request, exc: RequestValidationError):
    fields: dict[str, str] = {}
    for err in exc.errors():
        # loc looks like ("body", "teachingQuality")
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        fields.setdefault(".".join(loc) or "body", err.get("msg", "Invalid value"))
    return JSONResponse(status_code=400, content={"error": "Validation failed", "fields": fields})
