"""
Event Endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from alumni_hub.exceptions import InvalidOperationError, RecordNotFoundError
from alumni_hub.schemas.event import EventCreateRequest, EventResponse, RSVPResponse
from alumni_hub.schemas.person import Person
from alumni_hub.services.database import DatabaseService, get_db
from alumni_hub.utils.auth import get_current_user, require_admin
from alumni_hub.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/", response_model=List[EventResponse])
def list_events(db: DatabaseService = Depends(get_db)):
    """List all events ordered by date"""
    return db.list_events()


@router.get("/{event_id}", response_model=EventResponse)
def get_event(event_id: str, db: DatabaseService = Depends(get_db)):
    """
    Retrieve an event by ID.

    Args:
        event_id: Event identifier

    Returns:
        EventResponse: Event details
    """
    event = db.get_event(event_id)
    if not event:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Event '{event_id}' not found",
        )
    return event


@router.post("/", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    request: EventCreateRequest,
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(require_admin),
):
    """
    Create an event (admins only).

    Args:
        request: Event details

    Returns:
        EventResponse: Created event
    """
    try:
        return db.create_event(
            title=request.title,
            date=request.date,
            location=request.location,
            description=request.description,
            category=request.category,
            max_attendees=request.max_attendees,
            featured=request.featured,
            created_by=current_user.id,
        )

    except Exception as e:
        logger.error(f"Failed to create event: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create event: {str(e)}",
        )


@router.post("/{event_id}/rsvp", response_model=RSVPResponse)
def toggle_rsvp(
    event_id: str,
    db: DatabaseService = Depends(get_db),
    current_user: Person = Depends(get_current_user),
):
    """
    RSVP to an event, or withdraw an existing RSVP.

    Args:
        event_id: Event identifier

    Returns:
        RSVPResponse: Updated event and the user's attendance
    """
    try:
        event, attending = db.toggle_rsvp(event_id, current_user.id)
        return RSVPResponse(event=event, attending=attending)

    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidOperationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to update RSVP: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update RSVP: {str(e)}",
        )
