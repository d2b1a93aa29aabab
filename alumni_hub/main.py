"""
FastAPI Application Entry Point

This module initializes the FastAPI application with all routes,
middleware, and startup/shutdown events.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from alumni_hub import __version__
from alumni_hub.api.v1 import auth, events, fundraisers, health, messages, search, stats, users
from alumni_hub.config import Settings, settings as default_settings
from alumni_hub.services.database import DatabaseService
from alumni_hub.services.seed import seed_default_data
from alumni_hub.utils.logger import get_logger

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app with (environment settings by default)

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Alumni network: directory search, events, fundraisers and messaging",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Record store
    db = DatabaseService(settings.DATABASE_URL, echo=settings.DB_ECHO)
    db.create_tables()
    if settings.SEED_DEFAULT_DATA:
        seed_default_data(db)
    app.state.db = db
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health.router, prefix="/api/v1", tags=["Health"])
    app.include_router(stats.router, prefix="/api/v1", tags=["Stats"])
    app.include_router(auth.router, prefix="/api/v1/auth", tags=["Auth"])
    app.include_router(users.router, prefix="/api/v1/users", tags=["Users"])
    app.include_router(search.router, prefix="/api/v1/search", tags=["Search"])
    app.include_router(events.router, prefix="/api/v1/events", tags=["Events"])
    app.include_router(fundraisers.router, prefix="/api/v1", tags=["Fundraisers"])
    app.include_router(messages.router, prefix="/api/v1/conversations", tags=["Messages"])

    @app.on_event("startup")
    async def startup_event():
        """Log service start"""
        logger.info(f"Starting {settings.APP_NAME}", environment=settings.ENVIRONMENT)

    @app.on_event("shutdown")
    async def shutdown_event():
        """Cleanup on shutdown"""
        logger.info(f"Shutting down {settings.APP_NAME}")
        db.close()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "alumni_hub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=default_settings.LOG_LEVEL.lower(),
    )
