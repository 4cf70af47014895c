# client_api/main.py

import logging
from typing import Optional
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from fastapi.openapi.utils import get_openapi

from client_api.adapters.configuration.config import Settings, settings as default_settings
from client_api.adapters.inbound.api.mappers.client_mapper import ClientMapper
from client_api.adapters.inbound.api.v1.endpoints.client_endpoint import ClientEndpoint
from client_api.adapters.inbound.api.v1.router import build_api_router
from client_api.adapters.outbound.persistence.database import build_engine, build_session_factory, create_tables
from client_api.adapters.outbound.persistence.repositories.client_repository import AsyncClientRepository
from client_api.application.ports.inbound import IClientService
from client_api.application.use_cases.client_use_cases import AsyncClientService
from client_api.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
    validation_exception_handler,
)

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if default_settings.DEBUG else getattr(logging, default_settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


def create_app(
        settings: Optional[Settings] = None,
        client_service: Optional[IClientService] = None,
        client_mapper: Optional[ClientMapper] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Without a client_service, the SQLAlchemy-backed service is wired from
    settings.DATABASE_URL and its tables are created on startup.
    """
    settings = settings or default_settings
    engine = None
    if client_service is None:
        engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
        client_service = AsyncClientService(AsyncClientRepository(build_session_factory(engine)))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application starting up...")
        if engine is not None:
            await create_tables(engine)

        yield

        logger.info("Application shutting down...")
        if engine is not None:
            await engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Client CRUD API",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    # Middlewares
    app.add_middleware(AsyncRequestLoggingMiddleware, environment=settings.ENVIRONMENT)
    app.add_middleware(AsyncExceptionMiddleware, environment=settings.ENVIRONMENT)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Routers
    client_endpoint = ClientEndpoint(
        client_service=client_service,
        client_mapper=client_mapper or ClientMapper(),
        name=settings.APP_NAME,
        port=settings.SERVER_PORT,
    )
    app.include_router(build_api_router(client_endpoint))

    @app.get("/", include_in_schema=False)
    async def redirect_to_docs():
        return RedirectResponse(url="/docs")

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema

        spec = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )

        # Validation errors are answered with 400, never 422
        for schema in ("HTTPValidationError", "ValidationError"):
            spec.get("components", {}).get("schemas", {}).pop(schema, None)

        for path in spec.get("paths", {}).values():
            for op in path.values():
                op.get("responses", {}).pop("422", None)

        app.openapi_schema = spec
        return spec

    app.openapi = custom_openapi

    return app


app = create_app()


def run():
    """Console entry point: serve the application with uvicorn."""
    import uvicorn

    uvicorn.run("client_api.main:app", host="0.0.0.0", port=int(default_settings.SERVER_PORT))
