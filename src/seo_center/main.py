from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from asgi_correlation_id import CorrelationIdMiddleware, correlation_id
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.middleware.base import RequestResponseEndpoint

from src.seo_center.api.v1.router import api_router
from src.seo_center.core.config import Settings, get_settings
from src.seo_center.core.db import create_schema, dispose_engine, get_engine
from src.seo_center.core.exceptions import setup_exception_handlers
from src.seo_center.core.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from src.seo_center.persistence import LocalPersistence, ObjectStorage, RemotePersistence
from src.seo_center.services.identity import IdentitySignal
from src.seo_center.services.store import ProjectStore

logger = get_logger(__name__)


def build_store(
    settings: Settings,
    engine: AsyncEngine | None = None,
    identity: IdentitySignal | None = None,
) -> ProjectStore:
    """Wire the store from settings. Tests pass their own engine."""
    storage = ObjectStorage(
        root=settings.attachments_dir,
        bucket=settings.attachments_bucket,
        public_base_url=settings.attachments_public_url,
    )
    return ProjectStore(
        local=LocalPersistence(settings.local_data_dir, settings.local_store_key),
        remote=RemotePersistence(storage, engine=engine),
        identity=identity,
        actor_label=settings.history_actor_label,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}")

    engine: AsyncEngine = getattr(app.state, "engine", None) or get_engine()
    app.state.engine = engine
    if settings.auto_create_schema:
        await create_schema(engine)

    identity = IdentitySignal()
    store = build_store(settings, engine=engine, identity=identity)
    await store.start()
    app.state.identity = identity
    app.state.store = store

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "session", "description": "Guest/cloud mode switching"},
    {"name": "projects", "description": "SEO projects, scores and reports"},
    {"name": "tasks", "description": "Task progress and attachments"},
]


def create_app(engine: AsyncEngine | None = None) -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="SEO project tracking with local and cloud storage",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    if engine is not None:
        app.state.engine = engine

    setup_exception_handlers(app)

    # Add correlation ID middleware first (outermost middleware)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "X-Request-ID"],
        expose_headers=["Content-Disposition"],
    )

    @app.middleware("http")
    async def logging_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Bind request_id to log context for all requests."""
        clear_request_context()
        bind_request_context(correlation_id.get())
        try:
            response = await call_next(request)
            return response
        finally:
            clear_request_context()

    app.include_router(api_router)

    # Public, read-only access to cloud attachments by URL
    app.mount(
        "/storage",
        StaticFiles(directory=settings.attachments_dir, check_dir=False),
        name="storage",
    )

    @app.get("/health")
    async def health(request: Request) -> JSONResponse:
        """Health check with database validation."""
        store: ProjectStore = request.app.state.store
        health_status: dict[str, Any] = {
            "status": "healthy",
            "mode": store.mode.value,
            "database": "unknown",
        }

        try:
            async with request.app.state.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            health_status["database"] = "healthy"
        except Exception as e:
            health_status["database"] = f"unhealthy: {str(e)}"
            # Guest mode keeps working without the database
            health_status["status"] = "degraded"

        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)

    return app


app = create_app()
