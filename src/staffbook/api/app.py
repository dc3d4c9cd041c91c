"""
Main FastAPI application for Staffbook backend
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings as default_settings
from ..context import create_service_context
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build the service context on startup and release it on shutdown."""
        logger.info("Starting Staffbook API...", environment=settings.environment)
        app.state.services = await create_service_context(settings)

        yield

        logger.info("Shutting down Staffbook API...")
        await app.state.services.close()
        app.state.services = None

    app = FastAPI(
        title="Staffbook API",
        description="GraphQL API for user accounts and employee records",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root_status():  # pyright: ignore [reportUnusedFunction]
        """Liveness endpoint."""
        return {"status": "ok"}

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(graphiql=settings.debug), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Configure logging before the application instance is created
configure_logging(debug=default_settings.debug, level=default_settings.log_level)

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "staffbook.api.app:app",
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_reload,
        log_level=default_settings.log_level.lower(),
    )
