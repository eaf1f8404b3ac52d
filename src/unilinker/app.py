from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles

from unilinker import __version__
from unilinker.api.models import ApiError, HealthStatus
from unilinker.api.router import router as api_router
from unilinker.config import ServerConfig, load_server_config
from unilinker.errors import UniversityNotFoundError
from unilinker.links import build_deep_link
from unilinker.registry import UniversityRegistry, build_registry
from unilinker.ui.router import STATIC_DIR as UI_STATIC_DIR
from unilinker.ui.router import render_not_found
from unilinker.ui.router import router as ui_router

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "UniLinker Deep Link Server is running"

ROUTE_SUMMARY = (
    ("GET", "/", "Link generator interface"),
    ("GET", "/api/universities", "List all universities"),
    ("GET", "/api/generate-link/{id}", "Generate deep link"),
    ("GET", "/uni/{id}", "Redirect to deep link"),
    ("GET", "/download-apk", "App install instructions"),
    ("GET", "/health", "Health check"),
)


def configure_logging(config: ServerConfig) -> None:
    root = logging.getLogger()
    root.setLevel(config.logging.level.upper())

    if not config.logging.file:
        return

    log_path = Path(config.logging.file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    # Avoid adding duplicate handlers if reloaded
    if any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        return
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=config.logging.max_size_mb * 1024 * 1024,
        backupCount=config.logging.backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    root.addHandler(file_handler)


def _log_available_links(registry: UniversityRegistry, port: int) -> None:
    logger.info("Available deep links:")
    for uni in registry:
        logger.info("  http://localhost:%s/uni/%s -> %s", port, uni.id, build_deep_link(uni.id))
    logger.info("Routes:")
    for method, path, summary in ROUTE_SUMMARY:
        logger.info("  %-4s %-28s %s", method, path, summary)


def _is_api_path(request: Request) -> bool:
    return request.url.path.startswith("/api/")


def create_app(
    config: ServerConfig | None = None,
    registry: UniversityRegistry | None = None,
) -> FastAPI:
    if config is None:
        config = load_server_config()
    if registry is None:
        registry = build_registry(config)

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        configure_logging(config)
        logger.info(
            "UniLinker Deep Link Server starting on %s:%s",
            config.network.bind_host,
            config.network.port,
        )
        _log_available_links(registry, config.network.port)
        yield
        logger.info("UniLinker Deep Link Server stopped")

    app = FastAPI(title="UniLinker Deep Link Server", version=__version__, lifespan=_lifespan)

    # Both are read-only for the lifetime of the process.
    app.state.config = config
    app.state.registry = registry

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} - {response.status_code}")
        return response

    @app.exception_handler(UniversityNotFoundError)
    async def _not_found_handler(request: Request, exc: UniversityNotFoundError) -> Response:
        logger.info("Unknown university id %r", exc.university_id)
        if _is_api_path(request):
            return JSONResponse(
                status_code=404,
                content=ApiError(error="University not found").model_dump(),
            )
        return render_not_found(request)

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=ApiError(error="Request validation failed").model_dump(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
        if _is_api_path(request):
            return JSONResponse(
                status_code=exc.status_code,
                content=ApiError(error=message).model_dump(),
                headers=exc.headers,
            )
        if exc.status_code == 404:
            return render_not_found(request, message="Page not found")
        return PlainTextResponse(message, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> Response:
        # The server logs the traceback when the error is re-raised after this handler.
        logger.error("Unhandled error on %s %s: %r", request.method, request.url.path, exc)
        if _is_api_path(request):
            return JSONResponse(
                status_code=500,
                content=ApiError(error="Internal server error").model_dump(),
            )
        return PlainTextResponse("Internal server error", status_code=500)

    app.include_router(api_router)

    if UI_STATIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=str(UI_STATIC_DIR)), name="static")
    else:
        logger.warning(
            "UI static directory is missing (%s); /static will not be served",
            UI_STATIC_DIR,
        )

    if config.public_dir:
        public_dir = Path(config.public_dir).expanduser()
        if public_dir.is_dir():
            app.mount("/public", StaticFiles(directory=str(public_dir)), name="public")
        else:
            logger.warning("public_dir %s is not a directory; /public will not be served", public_dir)

    app.include_router(ui_router)

    @app.get("/health", response_model=HealthStatus)
    async def health() -> HealthStatus:
        return HealthStatus(status="ok", message=HEALTH_MESSAGE)

    return app
