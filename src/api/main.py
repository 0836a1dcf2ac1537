"""FastAPI application factory."""
import logging
import time
from datetime import UTC, datetime

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from api.routers import bookmarks, health
from core.auth import AuthenticationError
from core.config import Settings, get_settings
from core.logging_config import setup_logging
from db.memory import BookmarkStore
from db.seed import seed_bookmarks


logger = logging.getLogger(__name__)
access_logger = logging.getLogger("api.access")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        # HSTS: enforce HTTPS for 1 year, including subdomains
        response.headers["Strict-Transport-Security"] = (
            "max-age=31536000; includeSubDomains"
        )
        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"
        # Prevent clickjacking - API shouldn't be framed
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-DNS-Prefetch-Control"] = "off"
        response.headers["Referrer-Policy"] = "no-referrer"
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Write one access-log line per request.

    Production uses a terse format (method, path, status, size, duration);
    otherwise an Apache common log line is written.
    """

    def __init__(self, app: ASGIApp, production: bool = False) -> None:
        super().__init__(app)
        self.production = production

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        """Time the request and log it once the response is ready."""
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        length = response.headers.get("content-length", "-")

        if self.production:
            access_logger.info(
                "%s %s %d %s - %.3f ms",
                request.method, path, response.status_code, length, elapsed_ms,
            )
        else:
            client = request.client.host if request.client else "-"
            timestamp = datetime.now(UTC).strftime("%d/%b/%Y:%H:%M:%S %z")
            http_version = request.scope.get("http_version", "1.1")
            access_logger.info(
                '%s - - [%s] "%s %s HTTP/%s" %d %s',
                client, timestamp, request.method, path, http_version,
                response.status_code, length,
            )
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """
    Turn unexpected failures into a 500, hiding details in production.

    Runs inside the logging and security-header middlewares so error responses
    get an access-log line and hardening headers like any other response.
    """

    def __init__(self, app: ASGIApp, production: bool = False) -> None:
        super().__init__(app)
        self.production = production

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        """Pass the request through, rendering any uncaught exception as JSON."""
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            if self.production:
                content = {"error": {"message": "server error"}}
            else:
                content = {"message": str(exc), "error": type(exc).__name__}
            return JSONResponse(status_code=500, content=content)


def create_app(
    settings: Settings | None = None,
    store: BookmarkStore | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to run with; read from the environment when omitted.
        store: Bookmark store to serve; a fresh empty store when omitted. The
            sample bookmarks are loaded into it if ``seed_bookmarks`` is set.
    """
    app_settings = settings or get_settings()
    setup_logging(app_settings.log_level, app_settings.log_file)

    if store is None:
        store = BookmarkStore()
        if app_settings.seed_bookmarks:
            seed_bookmarks(store)

    app = FastAPI(
        title="Bookmarks API",
        description="An in-memory bookmark store guarded by a static bearer token.",
        version="0.1.0",
    )
    app.state.settings = app_settings
    app.state.bookmark_store = store

    @app.exception_handler(AuthenticationError)
    async def authentication_exception_handler(
        _request: Request, exc: AuthenticationError,
    ) -> JSONResponse:
        """Reject unauthenticated requests with a JSON error body."""
        return JSONResponse(
            status_code=401,
            content={"error": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Innermost: turns unhandled errors into a 500 that the middlewares below still see
    app.add_middleware(UnhandledErrorMiddleware, production=app_settings.is_production)

    # Request logging sees the final status of every request, 500s included
    app.add_middleware(RequestLoggingMiddleware, production=app_settings.is_production)

    # Security headers middleware (runs after CORS, adds headers to responses)
    app.add_middleware(SecurityHeadersMiddleware)

    origins = app_settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(bookmarks.router)

    return app
