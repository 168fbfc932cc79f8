# smart_feedback/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from smart_feedback.core.config import Settings, settings, setup_logging
from smart_feedback.api.v1.routers.feedback import router as feedback_router
from smart_feedback.api.v1.routers.reports import router as reports_router
from smart_feedback.api.v1.routers.sentiment import router as sentiment_router
from smart_feedback.infrastructure.db.session import create_schema

from smart_feedback.middleware.api_key_auth import ApiKeyAuthMiddleware, parse_api_keys
from smart_feedback.middleware.error_handler import http_error_handler, validation_error_handler
from smart_feedback.middleware.request_id import RequestIDMiddleware
from smart_feedback.middleware.request_timing import RequestTimingMiddleware


setup_logging()


def create_app(app_settings: Settings | None = None) -> FastAPI:
    cfg = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if cfg.auto_create_schema:
            await create_schema()
        yield

    app = FastAPI(title=cfg.app_name, lifespan=lifespan)
    app.state.settings = cfg

    app.add_middleware(ApiKeyAuthMiddleware, keys=parse_api_keys(cfg.api_keys))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in cfg.cors_origins.split(",") if o.strip()] if cfg.cors_origins else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(feedback_router)
    app.include_router(reports_router)
    app.include_router(sentiment_router)

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, http_error_handler)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app


app = create_app()
