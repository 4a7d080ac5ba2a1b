from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator
import logging
import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from focushub.core.config import settings
from focushub.data_layer.memory.store import MemoryStore
from focushub.data_layer.repos.base_repo import InvalidUpdateError
from focushub.utils.logging_utils import configure_logging
from focushub.api.task_routes import router as task_router
from focushub.api.event_routes import router as event_router
from focushub.api.pomodoro_routes import router as pomodoro_router
from focushub.api.note_routes import router as note_router
from focushub.api.water_routes import router as water_router
from focushub.api.habit_routes import router as habit_router
from focushub.api.distraction_routes import router as distraction_router
from focushub.api.settings_routes import router as settings_router
from focushub.api.analytics_routes import router as analytics_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[Any, None]:
    """Log startup and drop stored documents on shutdown."""
    logger.info(
        f"Starting {settings.app_name} {settings.app_version} ({settings.environment})")
    settings.log_analytics_config()
    try:
        yield
    finally:
        app.state.store.reset()
        logger.info(f"{settings.app_name} shut down")


def create_app(store: MemoryStore = None) -> FastAPI:
    """Build the API application around a store (a fresh one by default)."""
    configure_logging(settings)

    app = FastAPI(
        title="FocusHub API",
        description="API for the FocusHub personal productivity dashboard",
        version=settings.app_version,
        lifespan=lifespan
    )
    app.state.store = store if store is not None else MemoryStore()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
    )

    # Include routers
    for router in (task_router, event_router, pomodoro_router, note_router,
                   water_router, habit_router, distraction_router,
                   settings_router, analytics_router):
        app.include_router(router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        return {"name": settings.app_name, "version": settings.app_version}

    @app.get("/health")
    async def health_check():
        """Health check endpoint with per-collection document counts."""
        return {
            "status": "ok",
            "collections": app.state.store.stats(),
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat()
        }

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            f"Invalid request data for {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request data"},
        )

    @app.exception_handler(InvalidUpdateError)
    async def invalid_update_handler(request: Request, exc: InvalidUpdateError):
        logger.warning(
            f"Rejected update for {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request data"},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        logger.exception(f"Unhandled exception: {str(exc)}")
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error"},
        )

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    logger.info(
        f"Starting server with HTTP on {settings.api_host}:{settings.api_port}")
    uvicorn.run("focushub.main:app", host=settings.api_host,
                port=settings.api_port, reload=settings.debug)
