from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
import logging

import uvicorn

from .api import charts_router, queries_router
from .config import get_config
from .database import get_database
from .exceptions import DatabaseError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the configured database on startup and close it on shutdown."""
    config = get_config()
    config.log_configuration()
    if config.DATABASE_PATH:
        try:
            get_database().open(config.DATABASE_PATH)
        except DatabaseError as e:
            logger.error(f"Error opening configured database: {str(e)}")
    yield
    get_database().close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_config()
    app = FastAPI(
        title="Result Charts API",
        description="SQLite browsing with automatic chart recommendation",
        version="1.0.0",
        docs_url="/docs" if config.is_development_mode() else None,
        redoc_url="/redoc" if config.is_development_mode() else None,
        lifespan=lifespan,
    )

    if config.ENABLE_CORS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    return app


def register_routers(app: FastAPI) -> None:
    """Register all routers with the application."""

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        database = get_database()
        if not database.is_open:
            return {"status": "ok", "database": "none"}
        try:
            database.list_tables()
        except DatabaseError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Health check failed: {str(e)}"
            )
        return {"status": "ok", "database": str(database.path)}

    app.include_router(queries_router)
    app.include_router(charts_router)


def run() -> None:
    """Start the API server."""
    config = get_config()
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
    uvicorn.run(app, host=config.HOST, port=config.PORT)


# Create the FastAPI application instance
app = create_app()
register_routers(app)


if __name__ == "__main__":
    run()
