"""
Fundraiser Endpoints

Campaigns and simulated donations. No payment provider is contacted.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from alumni_hub.exceptions import InvalidOperationError, RecordNotFoundError
from alumni_hub.schemas.fundraiser import (
    DonationRequest,
    DonationResponse,
    FundraiserCreateRequest,
    FundraiserResponse,
    FundraiserStatus,
)
from alumni_hub.schemas.person import Person
from alumni_hub.services.database import DatabaseService, get_db
from alumni_hub.utils.auth import get_current_user, require_admin
from alumni_hub.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/fundraisers", response_model=List[FundraiserResponse])
def list_fundraisers(
    fundraiser_status: Optional[FundraiserStatus] = Query(None, alias="status"),
    db: DatabaseService = Depends(get_db),
):
    """
    List fundraisers.

    Args:
        fundraiser_status: Only campaigns in this status

    Returns:
        List[FundraiserResponse]: Fundraisers in creation order
    """
    return db.list_fundraisers(status=fundraiser_status)


@router.get("/fundraisers/{fundraiser_id}", response_model=FundraiserResponse)
def get_fundraiser(fundraiser_id: str, db: DatabaseService = Depends(get_db)):
    fundraiser = db.get_fundraiser(fundraiser_id)
    if not fundraiser:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Fundraiser '{fundraiser_id}' not found",
        )
    return fundraiser


@router.post("/fundraisers", response_model=FundraiserResponse, status_code=status.HTTP_201_CREATED)
def create_fundraiser(
    request: FundraiserCreateRequest,
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(require_admin),
):
    """
    Start a fundraiser (admins only).

    Args:
        request: Fundraiser details

    Returns:
        FundraiserResponse: Created fundraiser
    """
    try:
        return db.create_fundraiser(created_by=current_user.id, **request.model_dump())

    except Exception as e:
        logger.error(f"Failed to create fundraiser: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create fundraiser: {str(e)}",
        )


@router.post(
    "/fundraisers/{fundraiser_id}/donations",
    response_model=DonationResponse,
    status_code=status.HTTP_201_CREATED,
)
def donate(
    fundraiser_id: str,
    request: DonationRequest,
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(get_current_user),
):
    """
    Donate to a fundraiser.

    Args:
        fundraiser_id: Fundraiser identifier
        request: Amount and payment method

    Returns:
        DonationResponse: Recorded donation with its transaction id
    """
    try:
        return db.create_donation(
            fundraiser_id=fundraiser_id,
            user_id=current_user.id,
            amount=request.amount,
            payment_method=request.payment_method,
            status=request.status,
        )

    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidOperationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to record donation: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to record donation: {str(e)}",
        )


@router.get("/fundraisers/{fundraiser_id}/donations", response_model=List[DonationResponse])
def list_fundraiser_donations(fundraiser_id: str, db: DatabaseService = Depends(get_db)):
    try:
        return db.list_donations_by_fundraiser(fundraiser_id)

    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/donations/me", response_model=List[DonationResponse])
def list_my_donations(
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(get_current_user),
):
    """Donations made by the acting user"""
    return db.list_donations_by_user(current_user.id)
