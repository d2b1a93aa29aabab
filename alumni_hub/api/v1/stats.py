"""
Statistics Endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status

from alumni_hub.schemas.stats import StatsResponse
from alumni_hub.services.database import DatabaseService, get_db
from alumni_hub.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/stats", response_model=StatsResponse)
def get_stats(db: DatabaseService = Depends(get_db)):
    """
    Network-wide totals for the admin dashboard.

    Returns:
        StatsResponse: Fundraising, user and event counters
    """
    try:
        return db.get_stats()
    except Exception as e:
        logger.error(f"Failed to compute stats: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to compute stats: {str(e)}",
        )
