"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schemagate import __version__
from schemagate.config import Settings, settings
from schemagate.logging_config import configure_logging
from schemagate.schemas.cache import SchemaCache
from schemagate.schemas.validator import JsonSchemaValidator, initialize_validator

configure_logging(log_level=settings.log_level, json_output=settings.json_logs)

logger = logging.getLogger(__name__)


def build_validator(app_settings: Settings) -> JsonSchemaValidator:
    """Compose the cache and validator for one process."""
    schema_settings = app_settings.schema_settings
    return JsonSchemaValidator(SchemaCache(schema_settings), schema_settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Preload the schema on startup; abort startup if it cannot be loaded."""
    validator: JsonSchemaValidator = app.state.validator
    initialize_validator(validator)

    logger.info("schemagate API started (schema=%s)", validator.location)
    yield

    validator.clear_cache()
    logger.info("schemagate API shutdown complete")


def create_app(
    app_settings: Settings | None = None,
    validator: JsonSchemaValidator | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app_settings = app_settings or settings
    app = FastAPI(
        title="schemagate API",
        version=__version__,
        description="JSON Schema validation gate in front of order processing.",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.validator = validator or build_validator(app_settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from schemagate.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    from schemagate.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from schemagate.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
