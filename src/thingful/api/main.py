"""
Thingful API Server - FastAPI application.

Design Pattern:
1. Lifespan connects the PostgresService pool and stores it on app.state.db
2. Exception handlers map errors to `{"error": message}` JSON bodies
3. Middleware: request logging, then CORS (added last so it runs first)
4. Routers for things and reviews

Endpoints:
- /health                           : Health check
- GET  /api/things                  : List things (public)
- GET  /api/things/{id}             : One thing (basic auth)
- GET  /api/things/{id}/reviews     : Reviews for a thing (basic auth)
- POST /api/reviews                 : Create a review (basic auth)
- GET  /api/reviews/{id}            : One review (basic auth)

Authorization header:
    Authorization: basic <base64(user_name:password)>

Running:
    # Development (auto-reload)
    thingful serve --reload

    # Direct
    uvicorn thingful.api.main:app --host 0.0.0.0 --port 8000
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from .errors import register_exception_handlers
from .routers import reviews_router, things_router
from ..services.postgres import PostgresService, get_postgres_service
from ..settings import settings


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log all incoming HTTP requests and responses.

    Logs request method, path and client on the way in, status and duration
    on the way out. Authorization headers are never logged.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        client_host = request.client.host if request.client else "unknown"
        logger.info(
            f"→ REQUEST: {request.method} {request.url.path} | Client: {client_host}"
        )

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"← RESPONSE: {request.method} {request.url.path} | "
            f"Status: {response.status_code} | "
            f"Duration: {duration_ms:.2f}ms"
        )

        return response


def create_app(db: PostgresService | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        db: PostgresService to use. Defaults to one built from settings
            (None when POSTGRES__ENABLED=false; data routes then return 503).

    Returns:
        Configured FastAPI application
    """
    database = db if db is not None else get_postgres_service()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting Thingful API ({settings.environment})")
        if database is not None:
            await database.connect()
        else:
            logger.warning("PostgreSQL disabled - data endpoints will return 503")
        app.state.db = database

        yield

        if database is not None:
            await database.disconnect()
        logger.info("Shutting down Thingful API")

    app = FastAPI(
        title="Thingful API",
        description="Things and their reviews",
        version="0.1.0",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.add_middleware(RequestLoggingMiddleware)

    # Add CORS middleware LAST (runs first in middleware chain)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*", "authorization"],
        expose_headers=["location"],
    )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    app.include_router(things_router)
    app.include_router(reviews_router)

    return app


# Create application instance
app = create_app()


# Main entry point for uvicorn
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "thingful.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )
