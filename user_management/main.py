"""FastAPI application factory and process entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from sqlalchemy.ext.asyncio import AsyncEngine

from user_management.infrastructure.config.logging_config import configure_logging
from user_management.infrastructure.config.settings import Settings, get_settings
from user_management.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
    create_tables,
)
from user_management.presentation.api.v1 import users
from user_management.presentation.dependencies import build_user_service
from user_management.presentation.error_schemas import ValidationErrorResponse
from user_management.presentation.exception_handlers import register_exception_handlers

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[AsyncEngine] = None,
) -> FastAPI:
    """
    Build the application with every dependency constructed explicitly.

    Args:
        settings: Configuration; loaded from the environment when omitted
        engine: Pre-built engine, e.g. an in-memory SQLite engine in tests.
            Built from settings when omitted.

    Returns:
        Configured FastAPI application. Its engine is disposed on shutdown.
    """
    if settings is None:
        settings = get_settings()
    if engine is None:
        engine = create_database_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.db_auto_create_tables:
            await create_tables(engine)
        logger.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)
        yield
        await engine.dispose()
        logger.info("Database engine disposed")

    app = FastAPI(
        title=settings.app_name,
        description="User management service: HTTP handlers over a user service over a SQL repository",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.user_service = build_user_service(create_session_factory(engine))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(users.router, prefix="/api/v1")

    @app.get("/")
    async def root() -> dict[str, str]:
        """Health check endpoint."""
        return {
            "message": settings.app_name,
            "status": "running",
            "version": settings.app_version,
            "environment": settings.environment,
        }

    _install_openapi(app)
    return app


def _install_openapi(app: FastAPI) -> None:
    """
    Customize OpenAPI schema to use our custom validation error format.

    Replaces the default HTTPValidationError schema with ValidationErrorResponse
    to match the actual error format returned by validation_error_handler.
    """

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )

        schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})
        schemas.pop("HTTPValidationError", None)
        schemas.pop("ValidationError", None)
        schemas["ValidationErrorResponse"] = ValidationErrorResponse.model_json_schema()

        for path_data in openapi_schema.get("paths", {}).values():
            for operation in path_data.values():
                if isinstance(operation, dict) and "422" in operation.get("responses", {}):
                    operation["responses"]["422"] = {
                        "description": "Validation Error",
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/ValidationErrorResponse"}
                            }
                        },
                    }

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


def main() -> None:
    """Run the service with uvicorn on SERVER_HOST:SERVER_PORT."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)

    logger.info("Server starting on %s:%d", settings.server_host, settings.server_port)
    uvicorn.run(
        create_app(settings),
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
