"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Easier to test (can create multiple instances)

2. Lifespan Events
   - startup: ping MongoDB, create indexes, seed demo data
   - shutdown: close the MongoDB client
   - A startup failure is logged and re-raised, so the server never
     accepts requests without a working database

3. Middleware Stack
   - CORS: Allow the browser client to call the API

4. Exception Handlers
   - GraphQL errors are reported by Strawberry in the response body
   - Anything escaping a plain HTTP route becomes a JSON 500
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging.handlers import TimedRotatingFileHandler

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookstore import __version__
from bookstore.config import Settings, get_settings
from bookstore.database import close_database, get_book_context, initialize_database
from bookstore.dependencies import DbContext
from bookstore.graphql import create_graphql_router

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# =============================================================================
# Logging Configuration
# =============================================================================
def configure_logging(settings: Settings) -> None:
    """
    Configure root logging.

    Always logs to the console. When LOG_DIR is set, also writes a log file
    rotated at midnight, keeping the last 7 days.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if settings.log_dir:
        os.makedirs(settings.log_dir, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(
                os.path.join(settings.log_dir, "bookstore.log"),
                when="midnight",
                backupCount=7,
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=LOG_FORMAT,
        handlers=handlers,
    )


settings = get_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name} ({settings.environment})...")

    try:
        summary = initialize_database(get_book_context(), settings)
    except Exception:
        logger.critical("Application failed to start", exc_info=True)
        raise

    logger.info(
        f"MongoDB ready: database '{settings.mongodb_database}', "
        f"{len(summary['indexes'])} indexes, {summary['seeded']} books seeded"
    )
    logger.info(f"{settings.app_name} started successfully")

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    close_database()


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## BookStore API

A GraphQL catalog of books with their authors and reviews.

### GraphQL
- **Queries**: books, pagedBooks, book
- **Mutations**: addBook, updateBook, deleteBook

POST queries to `/graphql`. Open it in a browser for the GraphiQL IDE.
        """,
        version=__version__,
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    # The single-page client is served from another origin
    # (http://localhost:4200 during development).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An error occurred processing your request"},
        )

    # -------------------------------------------------------------------------
    # GraphQL Endpoint
    # -------------------------------------------------------------------------
    graphql_router = create_graphql_router(ide_enabled=settings.graphql_ide_enabled)
    app.include_router(graphql_router, prefix="/graphql", tags=["GraphQL"])

    # -------------------------------------------------------------------------
    # Health Check Endpoints
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Liveness check",
        description="Check if the API process is running.",
    )
    async def health_check() -> dict:
        """Liveness probe: answers as long as the process serves requests."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
        }

    @app.get(
        "/health/ready",
        tags=["Health"],
        summary="Readiness check",
        description="Check if MongoDB is reachable.",
    )
    def readiness_check(context: DbContext) -> JSONResponse:
        """
        Readiness probe.

        Returns 503 while MongoDB does not answer, so load balancers stop
        routing traffic to this instance.
        """
        if context.ping():
            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content={"status": "ready", "database": "mongodb"},
            )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "database": "mongodb"},
        )

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": __version__,
            "graphql": "/graphql",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookstore.main:app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
