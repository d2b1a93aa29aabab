"""
Health Check Endpoints

Provides health and readiness checks for the application and its dependencies.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text

from alumni_hub import __version__
from alumni_hub.services.database import DatabaseService, get_db
from alumni_hub.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


class HealthResponse(BaseModel):
    """Health check response model"""

    status: str
    version: str
    services: dict


@router.get("/health", response_model=HealthResponse)
def health_check(db: DatabaseService = Depends(get_db)):
    """
    Health check endpoint.

    Returns:
        HealthResponse: Current health status of the application
    """
    try:
        with db.session() as session:
            session.execute(text("SELECT 1"))
        database = "healthy"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        database = "unhealthy"

    return {
        "status": "healthy" if database == "healthy" else "degraded",
        "version": __version__,
        "services": {"database": database},
    }
