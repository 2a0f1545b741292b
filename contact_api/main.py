"""
Main FastAPI application
"""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from contact_api.config.settings import Settings, settings as default_settings
from contact_api.database.submission_store import SubmissionStore
from contact_api.routes import contact, pages, submissions
from contact_api.services.submission_service import SubmissionService
from contact_api.utils.exceptions import GENERIC_ERROR_MESSAGE, BaseAPIException, ValidationError

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Build the application around one submissions file"""
    config = config or default_settings
    store = SubmissionStore(config.DATA_FILE)
    service = SubmissionService(store, strict=config.STRICT_VALIDATION, version=config.VERSION)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan - startup and shutdown events"""
        # Startup
        if store.ensure_exists():
            logger.info("🗂️ Created empty submissions file at %s", store.path)
        else:
            logger.info("🗂️ Using submissions file at %s", store.path)
        logger.info("🚀 %s v%s started", config.APP_NAME, config.VERSION)
        yield
        # Shutdown
        logger.info("👋 Application shutdown")

    app = FastAPI(title=config.APP_NAME, version=config.VERSION, lifespan=lifespan)
    app.state.settings = config
    app.state.submission_service = service

    @app.exception_handler(BaseAPIException)
    async def api_exception_handler(request: Request, exc: BaseAPIException):
        if isinstance(exc, ValidationError):
            logger.info("⚠️ %s %s rejected: %s", request.method, request.url.path, exc.detail)
        else:
            logger.error(
                "❌ %s %s failed: %s", request.method, request.url.path, exc.detail,
                exc_info=exc,
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "❌ %s %s crashed: %s", request.method, request.url.path, exc,
            exc_info=exc,
        )
        # Runs outside the middleware stack, so CORS headers are added here
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": GENERIC_ERROR_MESSAGE},
            headers=CORS_HEADERS,
        )

    # Not CORSMiddleware: it answers preflights with 200 and only when an
    # Origin header is sent; every OPTIONS here must get an empty 204.
    @app.middleware("http")
    async def cors(request: Request, call_next):
        # Preflight for any path, routed or not
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time
        logger.info(
            "🌐 %s %s - %d (%.2fs)", request.method, request.url.path, response.status_code, duration
        )
        return response

    # Include routers
    app.include_router(contact.router, prefix="/api")
    if config.EXPOSE_SUBMISSIONS:
        app.include_router(submissions.router, prefix="/api")

    # Optional static contact page
    if config.STATIC_DIR is not None:
        app.include_router(pages.router)
        app.mount("/static", StaticFiles(directory=str(config.STATIC_DIR)), name="static")

    return app


app = create_app()
