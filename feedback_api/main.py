"""FastAPI entrypoint for the feedback service.

Keep this file boring and obvious:
- build the store and hydrate it from disk
- create the app and include the router
- answer pre-flight requests and stamp CORS headers
- render API errors as JSON

Run locally:
  feedback-api
or
  uvicorn feedback_api.main:create_app --factory --port 3000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.responses import CORS_HEADERS, PrettyJSONResponse
from .api.v1.feedback import router as feedback_router
from .core.config import Settings, get_settings
from .core.errors import AVAILABLE_ROUTES, FeedbackAPIError, MethodNotAllowed, RouteNotFound
from .core.logging import get_logger
from .db.repository import build_repository
from .db.store import FeedbackStore
from .observability.otel import setup_otel

logger = get_logger(__name__)


def build_store(settings: Settings) -> FeedbackStore:
    store = FeedbackStore(build_repository(settings.feedback_file, atomic=settings.atomic_writes))
    store.initialize()
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Feedback data will be stored in: %s", settings.feedback_file)
    logger.info("Available endpoints: %s", ", ".join(AVAILABLE_ROUTES))
    yield
    logger.info("Shutting down server...")


async def _handle_api_error(request: Request, exc: FeedbackAPIError) -> PrettyJSONResponse:
    return PrettyJSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def _handle_http_error(request: Request, exc: StarletteHTTPException) -> PrettyJSONResponse:
    # Only routing produces these: unknown path (404) or known path, wrong method (405).
    if exc.status_code == 405:
        return await _handle_api_error(request, MethodNotAllowed(request.method, request.url.path))
    if exc.status_code == 404:
        return await _handle_api_error(request, RouteNotFound())
    return PrettyJSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


async def _handle_unexpected_error(request: Request, exc: Exception) -> PrettyJSONResponse:
    logger.exception("Request %s %s failed: %s", request.method, request.url.path, exc)
    return PrettyJSONResponse(
        status_code=500, content={"error": "Internal server error"}, headers=CORS_HEADERS
    )


def create_app(settings: Optional[Settings] = None, store: Optional[FeedbackStore] = None) -> FastAPI:
    settings = settings or get_settings()
    store = store if store is not None else build_store(settings)

    app = FastAPI(
        title=settings.app_name,
        lifespan=lifespan,
        default_response_class=PrettyJSONResponse,
        redirect_slashes=False,
        # Anything but /feedback is an unknown route.
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.store = store

    @app.middleware("http")
    async def preflight_and_cors(request: Request, call_next):
        target = request.url.path + (f"?{request.url.query}" if request.url.query else "")
        logger.info("%s %s", request.method, target)

        if request.method == "OPTIONS":
            response = PrettyJSONResponse({"message": "CORS preflight successful"})
        else:
            response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    app.add_exception_handler(FeedbackAPIError, _handle_api_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)

    app.include_router(feedback_router, tags=["feedback"])

    setup_otel(app)

    logger.info("Backend started (records=%d)", len(store))
    return app


def run() -> None:
    """Serve until interrupted; Ctrl+C drains in-flight requests and exits 0."""
    settings = get_settings()
    logger.info("Product Feedback API Server running on http://localhost:%d", settings.port)
    try:
        uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)
    except KeyboardInterrupt:
        # uvicorn re-raises SIGINT after its graceful shutdown.
        pass
    logger.info("Server closed.")


if __name__ == "__main__":
    run()
