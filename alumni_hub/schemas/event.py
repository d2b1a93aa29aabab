"""
Event Pydantic Schemas
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from alumni_hub.schemas.base import CamelModel


class EventCreateRequest(CamelModel):
    """Request schema for creating an event"""

    title: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    description: str = ""
    category: Optional[str] = None
    max_attendees: Optional[int] = Field(None, ge=1)
    featured: bool = False


class EventResponse(CamelModel):
    """Response schema for an event"""

    id: str
    title: str
    description: str
    date: str
    location: str
    category: str
    featured: bool
    rsvp: int
    max_attendees: Optional[int]
    created_by: str
    created_at: datetime


class RSVPResponse(CamelModel):
    """Result of toggling attendance"""

    event: EventResponse
    attending: bool
