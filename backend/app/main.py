import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from app.core.config import settings
from app.core.errors import AppError, NotFoundError, StoreError, ValidationError
from app.api.middleware import BodyLimitMiddleware
from app.api.router import router
from app.db.session import create_db_engine
from app.db.store import Store

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    owned = app.state.store is None
    if owned:
        app.state.store = Store(create_db_engine(settings))
        if settings.CREATE_SCHEMA_ON_STARTUP:
            app.state.store.ensure_schema()
    logger.info("Kid Draughts API ready (env=%s)", settings.ENV)
    try:
        yield
    finally:
        if owned:
            app.state.store.dispose()
            app.state.store = None
        logger.info("Kid Draughts API shutting down")


def _error_body(exc: AppError) -> dict:
    body = {"ok": False}
    if exc.code:
        body["error"] = exc.code
    return body


def create_app(store: Store | None = None) -> FastAPI:
    """Build the application. Tests pass their own ``store``; otherwise one is
    created from settings during startup."""
    app = FastAPI(
        title="Kid Draughts API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(BodyLimitMiddleware, max_bytes=settings.MAX_BODY_BYTES)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if isinstance(exc, NotFoundError):
            return PlainTextResponse("Not found", status_code=404)
        if isinstance(exc, StoreError):
            logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
        elif isinstance(exc, ValidationError):
            logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed JSON bodies and non-numeric path ids
        return JSONResponse(status_code=400, content=_error_body(ValidationError()))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content=_error_body(StoreError()))

    app.include_router(router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app


app = create_app()
