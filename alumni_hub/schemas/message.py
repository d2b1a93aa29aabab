"""
Messaging Pydantic Schemas
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from alumni_hub.schemas.base import CamelModel


class MessageResponse(CamelModel):
    """Response schema for a message"""

    id: str
    conversation_id: str
    sender_id: str
    receiver_id: str
    content: str
    read: bool
    created_at: datetime


class ConversationResponse(CamelModel):
    """Response schema for a conversation"""

    id: str
    participants: List[str]
    last_message: Optional[MessageResponse] = None
    created_at: datetime
    updated_at: datetime


class ConversationCreateRequest(CamelModel):
    """Start (or reopen) a conversation with another user"""

    participant_id: str = Field(..., min_length=1)


class MessageCreateRequest(CamelModel):
    """Send a message in a conversation"""

    content: str = Field(..., min_length=1)
