"""
Profile Endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from alumni_hub.exceptions import RecordNotFoundError
from alumni_hub.schemas.person import Person, ProfileUpdate
from alumni_hub.services.database import DatabaseService, get_db
from alumni_hub.utils.auth import get_current_user
from alumni_hub.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/", response_model=List[Person])
def list_users(db: DatabaseService = Depends(get_db)):
    """List every member in collection order"""
    return db.list_all_persons()


@router.get("/{user_id}", response_model=Person)
def get_user(user_id: str, db: DatabaseService = Depends(get_db)):
    """
    Retrieve a member profile.

    Args:
        user_id: Public user id

    Returns:
        Person: Profile
    """
    user = db.get_user(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{user_id}' not found",
        )
    return user


@router.patch("/{user_id}", response_model=Person)
def update_user(
    user_id: str,
    request: ProfileUpdate,
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(get_current_user),
):
    """
    Edit your own profile.

    Args:
        user_id: Public user id; must be the acting user
        request: Fields to change

    Returns:
        Person: Updated profile
    """
    if current_user.id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only edit your own profile",
        )

    try:
        return db.update_user(user_id, request.model_dump(exclude_unset=True))

    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to update user: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update user: {str(e)}",
        )
